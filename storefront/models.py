# storefront/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    price: int = Field(..., ge=0, description="Price in paise")
    image: str
    category: str
    description: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
