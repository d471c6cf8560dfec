#!/usr/bin/env python3
"""
Destination Recommendation Test Script

Calls Gemini through the recommendation service directly, without starting
the web app or touching Supabase.

Usage:
    python scripts/try_recommendation.py
    python scripts/try_recommendation.py --username Ana --age 29 --style Relaxed --activity Hiking
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

os.environ.setdefault("VALIDATE_CONFIG", "false")

from travel_recommender.config import settings  # noqa: E402
from travel_recommender.services.recommendation_service import (  # noqa: E402
    RecommendationServiceError,
    generate_recommendation,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def run(username: str, age: str, style: str, activity: str) -> int:
    """Run a single recommendation and print it."""
    if not settings.GEMINI_API_KEY:
        print("\nERROR: GEMINI_API_KEY environment variable not set!")
        print("   Set it in your .env file or export it:")
        print("   export GEMINI_API_KEY=your-gemini-api-key")
        return 1

    print("\n" + "=" * 60)
    print(f"DESTINATION RECOMMENDATION ({settings.GEMINI_MODEL})")
    print("=" * 60)
    print(f"\nUsername: {username}")
    print(f"Age:      {age}")
    print(f"Style:    {style}")
    print(f"Activity: {activity}")
    print("\nCalling Gemini API...")

    try:
        result = await generate_recommendation(
            api_key=settings.GEMINI_API_KEY,
            username=username,
            age=age,
            style=style,
            activity=activity,
        )
    except RecommendationServiceError as e:
        print(f"\nFailed: {e.message}\n")
        return 1

    print(f"\n{result.city}, {result.country}")
    print(f"  {result.recommendation}\n")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Try the destination recommendation locally")
    parser.add_argument("--username", default="Ana")
    parser.add_argument("--age", default="29")
    parser.add_argument("--style", default="Relaxed")
    parser.add_argument("--activity", default="Hiking")
    args = parser.parse_args()

    return asyncio.run(run(args.username, args.age, args.style, args.activity))


if __name__ == "__main__":
    sys.exit(main())
