SOIL_IMAGE_SYSTEM_PROMPT = "You are an agronomist. Be visual-first and pragmatic."

# The image itself is not uploaded; only its URI is appended as context.
SOIL_IMAGE_USER_PROMPT = """You are given a photograph of bare topsoil. Visually infer likely soil texture (sandy/loam/clay), drainage, organic matter indications, compaction, and moisture. Then:
- Soil condition: 1-2 sentences, practical.
- Climate snapshot: Assume season is current month and general temperate conditions; note risks (heat/drought/excess rain) generically.
- Recommended crops: top 3 globally common crops suited to the inferred soil condition.
- Rotation plan: 3 bullet lines (Year 1-3) including legumes where appropriate.
Return clear text. Keep total under 160 words.
Image URI: {image_uri}"""
