"""TableBot configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiscordSettings(BaseSettings):
    """Discord configuration settings."""

    DISCORD_TOKEN: str = Field(default="", alias="DISCORD_TOKEN")
    CLIENT_ID: str = Field(default="", alias="DISCORD_CLIENT_ID")
    GUILD_ID: str = Field(default="", alias="DISCORD_GUILD_ID")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class TablelandSettings(BaseSettings):
    """Tableland gateway configuration settings."""

    MAINNET_GATEWAY_URL: str = Field(
        default="https://tableland.network", alias="TABLELAND_MAINNET_GATEWAY_URL"
    )
    TESTNET_GATEWAY_URL: str = Field(
        default="https://testnets.tableland.network",
        alias="TABLELAND_TESTNET_GATEWAY_URL",
    )
    LOCAL_GATEWAY_URL: str = Field(
        default="http://localhost:8080", alias="TABLELAND_LOCAL_GATEWAY_URL"
    )
    RENDER_URL: str = Field(
        default="https://render.tableland.xyz", alias="TABLELAND_RENDER_URL"
    )
    SQL_DIALECT: str = Field(default="sqlite", alias="TABLELAND_SQL_DIALECT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class OpenSeaSettings(BaseSettings):
    """OpenSea configuration settings."""

    API_URL: str = Field(default="https://api.opensea.io", alias="OPENSEA_API_URL")
    COLLECTION_SLUG: str = Field(
        default="tableland-rigs", alias="OPENSEA_COLLECTION_SLUG"
    )
    API_KEY: str | None = Field(default=None, alias="OPENSEA_API_KEY")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class RigsSettings(BaseSettings):
    """Tableland Rigs metadata configuration settings."""

    GRAPHQL_URL: str = Field(
        default="https://api.zora.co/graphql", alias="RIGS_GRAPHQL_URL"
    )
    CONTRACT_ADDRESS: str = Field(
        default="0x8EAa9AE1Ac89B1c8C8a8104D08C045f78Aadb42D",
        alias="RIGS_CONTRACT_ADDRESS",
    )
    MARKETPLACE_URL: str = Field(
        default="https://opensea.io/assets/ethereum", alias="RIGS_MARKETPLACE_URL"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class HttpSettings(BaseSettings):
    """Outbound HTTP configuration settings."""

    TIMEOUT: int = Field(default=30, alias="HTTP_TIMEOUT")
    USER_AGENT: str = Field(default="TableBot/1.0", alias="HTTP_USER_AGENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """TableBot configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Platform settings
    discord: DiscordSettings

    # Integration settings
    tableland: TablelandSettings
    opensea: OpenSeaSettings
    rigs: RigsSettings
    http: HttpSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "discord": DiscordSettings,
            "tableland": TablelandSettings,
            "opensea": OpenSeaSettings,
            "rigs": RigsSettings,
            "http": HttpSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
