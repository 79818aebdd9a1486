from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class PaymentSettings(BaseSettings):
    """
    Hosted checkout (Stripe) settings.
    Loaded automatically from .env with prefix STRIPE_*

    When secret_key is empty the fake gateway is used instead of Stripe.
    """

    secret_key: Optional[str] = None
    currency: str = Field(default="cad", min_length=3, max_length=3)
    success_url: str = "https://einercupino.github.io/toyhubshop/success"
    cancel_url: str = "https://einercupino.github.io/toyhubshop/cancel"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "STRIPE_",
        "extra": "ignore",
    }

    @property
    def enabled(self) -> bool:
        return bool(self.secret_key)
