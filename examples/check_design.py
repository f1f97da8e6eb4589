#!/usr/bin/env python
"""
Example script for calling the Design Catalog API.

Checks a new design name against the catalog and, if the user agrees after
seeing any duplicates, adds it.

    pip install -e ".[examples]"
    python examples/check_design.py ROSGOLD
"""

import asyncio
import sys
from typing import Any, Dict

import httpx

API_URL = "http://localhost:8000"


async def check_design(client: httpx.AsyncClient, candidate: str) -> Dict[str, Any]:
    """
    Ask the API for the similarity verdict of a candidate design name.

    Args:
        client: Open HTTP client
        candidate: Design name to check

    Returns:
        Dict[str, Any]: The verdict, or an empty dict on error
    """
    response = await client.post(f"{API_URL}/designs/check", json={"candidate": candidate})
    if response.status_code != 200:
        print(f"Error: {response.status_code}")
        print(response.text)
        return {}
    return response.json()


def display_verdict(candidate: str, verdict: Dict[str, Any]) -> None:
    print(f"\n====== DESIGN CHECK: {candidate.upper()} ======\n")

    numeric = verdict.get("conflicting_numeric_matches", [])
    if verdict.get("is_numeric_duplicate"):
        print(f"Same design number as: {', '.join(numeric)}")
    else:
        print("No design with the same number")

    scores = verdict.get("similarity_scores", {})
    similar = verdict.get("similar_matches", [])
    if similar:
        print("Similar designs:")
        for title in similar:
            print(f"- {title} ({scores.get(title, 0.0):.1f}%)")
    else:
        print("No similar designs")


async def main(candidate: str) -> None:
    async with httpx.AsyncClient(timeout=10.0) as client:
        verdict = await check_design(client, candidate)
        if not verdict:
            return
        display_verdict(candidate, verdict)

        confirm = False
        if verdict.get("conflicting_numeric_matches") or verdict.get("similar_matches"):
            answer = input("\nAdd this design anyway? [y/N] ")
            if answer.strip().lower() != "y":
                print("Not added.")
                return
            confirm = True

        response = await client.post(
            f"{API_URL}/designs",
            json={"title": candidate, "confirm": confirm},
        )
        if response.status_code != 201:
            print(f"Error: {response.status_code}")
            print(response.text)
            return
        print(f"Design \"{response.json()['design']['title']}\" added successfully")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: check_design.py DESIGN_NAME")
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
