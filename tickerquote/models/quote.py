from pydantic import BaseModel, ConfigDict, TypeAdapter


class Quote(BaseModel):
    """One entry of the FMP /quote array. Only the fields we print are kept."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    symbol: str
    price: float
    change: float | None = None


QuoteList = TypeAdapter(list[Quote])
