"""
FastAPI routers.

- recommend: POST /api/recommend (Gemini destination endpoint)
- records: GET /api/recommendations (stored timeline, newest first)
- views: HTML form + timeline page and the /ws/timeline live feed
- health: GET /health
"""
