"""Seed categories from categories.json through a running Category Service."""
import asyncio
import json
import os
from typing import List

import httpx
from dotenv import load_dotenv

# --- Configuration ---
load_dotenv()
API_BASE_URL = os.getenv("API_BASE_URL")
CATEGORIES_FILE = os.getenv("CATEGORIES_FILE", "categories.json")


def load_category_names(path: str = CATEGORIES_FILE) -> List[str]:
    with open(path, "r") as f:
        return [entry["name"] for entry in json.load(f)]


async def upload_categories(client: httpx.AsyncClient, names: List[str]) -> dict:
    """
    POST every name; a 409 means the category is already there.

    Returns a summary with the names that were created, skipped and failed.
    """
    summary = {"created": [], "skipped": [], "failed": []}
    for name in names:
        try:
            response = await client.post("/categories/", json={"name": name})
            if response.status_code == 409:  # Conflict
                print(f"Category '{name}' already exists. Skipping.")
                summary["skipped"].append(name)
            elif response.status_code == 201:  # Created
                print(f"Successfully created category: {name}")
                summary["created"].append(name)
            else:
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            print(f"Error creating category '{name}': {e.response.text}")
            summary["failed"].append(name)
    return summary


async def upload_data_via_api():
    if not API_BASE_URL:
        print("Error: API_BASE_URL environment variable not set.")
        print("Please create or update your .env file with API_BASE_URL=<your-app-url>")
        return

    try:
        names = load_category_names()
    except FileNotFoundError:
        print(f"Error: {CATEGORIES_FILE} not found. Please ensure it's in the project root.")
        return

    async with httpx.AsyncClient(base_url=API_BASE_URL) as client:
        # --- Health Check ---
        try:
            print(f"Checking API health at {API_BASE_URL}/health_check/...")
            health_response = await client.get("/health_check/")
            health_response.raise_for_status()
            print("API is healthy. Proceeding with data upload.")
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            print(f"Error: API health check failed: {e}")
            return

        print("\n--- Uploading Categories ---")
        summary = await upload_categories(client, names)

    print(
        f"\nData upload process finished: {len(summary['created'])} created, "
        f"{len(summary['skipped'])} skipped, {len(summary['failed'])} failed."
    )


if __name__ == "__main__":
    asyncio.run(upload_data_via_api())
