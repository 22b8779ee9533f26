YIELD_ROTATION_SYSTEM_PROMPT = "You are a farm planning assistant."

YIELD_ROTATION_USER_PROMPT = """Create a concise yield prediction and 3-year rotation plan.
Crop: {crop}
Area: {area_ha} ha
Location: {location}
Recent rotation: {history}
Include: expected yield range with assumptions (climate normal), inputs recommendation, and rotation schedule (Year1-3). Keep <=150 words."""
