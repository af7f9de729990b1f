from pydantic import Field
from pydantic_settings import BaseSettings  # Correct import for Pydantic v2
from dotenv import load_dotenv

# Load environment variables from the .env file.
load_dotenv()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Pydantic's BaseSettings handles type validation automatically.
    """

    # Project Info
    PROJECT_NAME: str = "Storefront Catalog API"
    VERSION: str = "1.0.0"
    STORE_NAME: str = Field(
        "My Storefront", description="Name used in the default header and footer."
    )

    LOG_LEVEL: str = Field("INFO", description="Root logging level.")

    # Fill an empty catalog with the demo products on startup.
    SEED_DEMO_DATA: bool = Field(True, description="Seed demo data on startup.")

    # Cart cookie
    CART_COOKIE_NAME: str = Field("cart", description="Cookie holding the cart.")
    CART_COOKIE_MAX_AGE: int = Field(
        60 * 60 * 24 * 30, description="Cart cookie lifetime in seconds."
    )
    CART_MAX_PAYLOAD_SIZE: int = Field(
        4096,
        description="Raw cart values longer than this decode to an empty cart.",
    )

    class Config:
        """
        Configuration for Pydantic's BaseSettings.
        """

        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Instantiate the settings object to be used throughout the application.
settings = Settings()
