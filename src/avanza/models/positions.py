"""
Account positions models, /_mobile/account/positions.
"""

from pydantic import BaseModel, Field


class Position(BaseModel):
    account_id: str = Field(default="", alias="accountId")
    account_name: str = Field(default="", alias="accountName")
    account_type: str = Field(default="", alias="accountType")
    acquired_value: float = Field(default=0.0, alias="acquiredValue")
    average_acquired_price: float = Field(default=0.0, alias="averageAcquiredPrice")
    change: float = 0.0
    change_percent: float = Field(default=0.0, alias="changePercent")
    currency: str = ""
    depositable: bool = False
    flag_code: str = Field(default="", alias="flagCode")
    last_price: float = Field(default=0.0, alias="lastPrice")
    last_price_updated: str = Field(default="", alias="lastPriceUpdated")
    name: str
    orderbook_id: str = Field(alias="orderbookId")
    profit: float = 0.0
    profit_percent: float = Field(default=0.0, alias="profitPercent")
    tradable: bool = False
    value: float = 0.0
    volume: float = 0

    model_config = {"populate_by_name": True}


class InstrumentPositions(BaseModel):
    instrument_type: str = Field(alias="instrumentType")
    positions: list[Position] = []
    todays_profit_percent: float = Field(default=0.0, alias="todaysProfitPercent")
    total_profit_percent: float = Field(default=0.0, alias="totalProfitPercent")
    total_profit_value: float = Field(default=0.0, alias="totalProfitValue")
    total_value: float = Field(default=0.0, alias="totalValue")

    model_config = {"populate_by_name": True}


class PositionsResponse(BaseModel):
    instrument_positions: list[InstrumentPositions] = Field(alias="instrumentPositions")
    total_profit: float = Field(alias="totalProfit")
    total_profit_percent: float = Field(alias="totalProfitPercent")
    total_balance: float = Field(alias="totalBalance")
    total_own_capital: float = Field(alias="totalOwnCapital")
    total_buying_power: float = Field(alias="totalBuyingPower")

    model_config = {"populate_by_name": True}
