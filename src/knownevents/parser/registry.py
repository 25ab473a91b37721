"""DetectorRegistry: ordered detector families, first non-None result wins."""

import logging

from knownevents.parser.detectors.account_keychain import AccountKeychainDetector
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.detectors.fee_amm import FeeAmmDetector
from knownevents.parser.detectors.fee_manager import FeeManagerDetector
from knownevents.parser.detectors.fee_payer import FeePayerDetector
from knownevents.parser.detectors.nonce import NonceDetector
from knownevents.parser.detectors.stablecoin_dex import StablecoinDexDetector
from knownevents.parser.detectors.tip20 import Tip20Detector
from knownevents.parser.detectors.tip20_factory import Tip20FactoryDetector
from knownevents.parser.detectors.tip403_registry import Tip403RegistryDetector
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.types import DetectionResult, ParsedEvent

logger = logging.getLogger(__name__)

# Order decides which family wins for overlapping logs; do not reorder.
TRANSACTION_DETECTORS: tuple[type[BaseDetector], ...] = (
    FeePayerDetector,
    Tip20Detector,
    Tip20FactoryDetector,
    StablecoinDexDetector,
    Tip403RegistryDetector,
    FeeManagerDetector,
    NonceDetector,
    AccountKeychainDetector,
    FeeAmmDetector,
)

SINGLE_EVENT_DETECTORS: tuple[type[BaseDetector], ...] = tuple(
    d for d in TRANSACTION_DETECTORS if d is not FeePayerDetector
)


class DetectorRegistry:
    """Runs detectors in priority order.

    A detector that raises is logged and treated as no match.
    """

    def __init__(self, detectors: list[BaseDetector]) -> None:
        self._detectors = list(detectors)

    @property
    def detectors(self) -> list[BaseDetector]:
        return list(self._detectors)

    def detect(self, event: ParsedEvent) -> DetectionResult | None:
        for detector in self._detectors:
            try:
                result = detector.detect(event)
            except Exception:
                logger.warning(
                    "Detector %s failed on %s from %s",
                    detector.DETECTOR_NAME, event.event_name, event.address,
                    exc_info=True,
                )
                continue
            if result is not None:
                return result
        return None


def build_default_registry(context: DetectionContext, include_fee_payer: bool = True) -> DetectorRegistry:
    """Create the registry for transaction mode, or single-event mode without the fee payer."""
    detector_classes = TRANSACTION_DETECTORS if include_fee_payer else SINGLE_EVENT_DETECTORS
    return DetectorRegistry([cls(context) for cls in detector_classes])
