"""
Quick demo script: starts the Travel Recommender locally.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Travel Recommender Demo")
    print("=" * 60)
    print()
    print("Pages & Endpoints:")
    print("   - Form + timeline:  GET  http://localhost:8000/")
    print("   - Recommend:        POST http://localhost:8000/api/recommend")
    print("   - Stored records:   GET  http://localhost:8000/api/recommendations")
    print("   - Live timeline:    WS   ws://localhost:8000/ws/timeline")
    print("   - Health Check:     GET  http://localhost:8000/health")
    print("   - API Docs:              http://localhost:8000/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/recommend" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"username": "Ana", "age": "29", "style": "Relaxed", "activity": "Hiking"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "travel_recommender.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
