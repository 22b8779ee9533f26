MARKET_DEMAND_SYSTEM_PROMPT = (
    "You are an agricultural market analyst. Be concise (<=100 words)."
)

MARKET_DEMAND_USER_PROMPT = (
    "Give today's global crop demand highlights for staples "
    "(rice, wheat, corn, soybean). Include price/demand trend directions only."
)
