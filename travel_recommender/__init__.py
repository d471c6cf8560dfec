"""
Travel Recommender.

Collects travel preferences through a form, asks Gemini for one structured
destination recommendation, stores it in Supabase and renders a live
timeline of past recommendations.
"""
