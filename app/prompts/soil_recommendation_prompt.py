SOIL_RECOMMENDATION_SYSTEM_PROMPT = "You are an agronomist. Be practical and specific."

SOIL_RECOMMENDATION_USER_PROMPT = """Analyze soil health and recommend top 3 crops.
Soil pH: {ph}
Nitrogen: {nitrogen_level}
Organic matter: {organic_matter}%
Region: {region}
Season: {season}
If pH is <5.5 or >8.0, note remediation. Provide bullet summary and a single best crop recommendation on its own line as "Best crop: <crop>"."""
