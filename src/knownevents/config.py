from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Tempo system contracts (all lowercase)
    fee_manager_address: str = "0xfeec000000000000000000000000000000000000"
    stablecoin_dex_address: str = "0xdec0000000000000000000000000000000000000"
    validator_config_address: str = "0xcccccccc00000000000000000000000000000000"

    class Config:
        env_file = ".env"
        env_prefix = "KNOWNEVENTS_"


settings = Settings()
