from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from typing import Optional, Dict, Any, Union

class ProductIn(BaseModel):
    """Body accepted by create and update. Unknown keys are kept on the record."""

    model_config = ConfigDict(extra="allow")

    name: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)
    price: Union[StrictInt, StrictFloat]
    category: StrictStr = Field(min_length=1)
    inStock: Optional[StrictBool] = None

def _make_product_dict(payload: Dict[str, Any]) -> Dict[str, Any]:
    # ids are only ever assigned by the store
    return {k: v for k, v in payload.items() if k != "id"}
