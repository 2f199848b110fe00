from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from advisor_gateway.adapters.market_data.base import AbstractMarketDataProvider
from advisor_gateway.api.deps import get_market_data_provider
from advisor_gateway.core.errors import NotFoundAppError
from advisor_gateway.schemas.envelope import ApiResponse
from advisor_gateway.schemas.financial import MarketData
from advisor_gateway.utils.request_validators import ensure_valid, validate_symbol

router = APIRouter(prefix="/market", tags=["Market"])

logger = logging.getLogger(__name__)


def _found(symbol: str, quote: MarketData | None, asset_type: str) -> ApiResponse[MarketData]:
    if quote is None:
        logger.warning("market.quote_not_found", extra={"symbol": symbol, "asset_type": asset_type})
        raise NotFoundAppError(
            code="quote_not_found",
            message=f"No data found for symbol: {symbol}",
            details={"symbol": symbol},
        )
    return ApiResponse[MarketData](data=quote)


@router.get("/stock/{symbol}", response_model=ApiResponse[MarketData])
async def get_stock_quote(
    symbol: str,
    provider: Annotated[AbstractMarketDataProvider, Depends(get_market_data_provider)],
) -> ApiResponse[MarketData]:
    """Latest stock quote for ``symbol``."""
    ensure_valid(validate_symbol({"symbol": symbol}))
    return _found(symbol, await provider.get_stock_quote(symbol), "stock")


@router.get("/crypto/{symbol}", response_model=ApiResponse[MarketData])
async def get_crypto_quote(
    symbol: str,
    provider: Annotated[AbstractMarketDataProvider, Depends(get_market_data_provider)],
) -> ApiResponse[MarketData]:
    """Latest crypto quote for a coin id such as ``bitcoin``."""
    ensure_valid(validate_symbol({"symbol": symbol}))
    return _found(symbol, await provider.get_crypto_quote(symbol), "crypto")
