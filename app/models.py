# app/models.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    inStock: Optional[bool] = None

class ProductPage(BaseModel):
    page: int
    limit: int
    total: int
    products: List[Product]

class ErrorBody(BaseModel):
    error: str
