from typing import Dict, List, Optional

from pydantic import BaseModel


class PaymentGatewayConfigSchema(BaseModel):
    """
    Stored as-is. Nothing in the application talks to the provider.
    """

    provider: str
    enabled: bool = False
    public_key: Optional[str] = None
    secret_key: Optional[str] = None
    metadata: Dict[str, str] = {}


class SiteSettingsSchema(BaseModel):
    header_html: str
    footer_html: str
    payment_gateways: List[PaymentGatewayConfigSchema] = []


class SiteSettingsUpdateSchema(BaseModel):
    header_html: Optional[str] = None
    footer_html: Optional[str] = None
    # Replaces the whole list when supplied.
    payment_gateways: Optional[List[PaymentGatewayConfigSchema]] = None
