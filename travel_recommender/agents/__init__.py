"""
AI components for the Travel Recommender.

The destination recommendation is a single structured-generation call to
Gemini (no tools, no multi-turn agent). Prompt templates live in
travel_recommender/agents/recommendation/prompts.py and the call itself in
travel_recommender/services/recommendation_service.py.
"""
