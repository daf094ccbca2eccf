"""Locust load testing script for Blog Race Analyzer."""

import random

from locust import HttpUser, between, task

# Knowledge base URLs take the static path, the rest fall back
SAMPLE_URLS = [
    "https://example.com/blog1",
    "https://example.com/blog2",
    "https://blog.hubspot.com/marketing/digital-marketing",
    "https://buffer.com/resources/social-media-calendar/",
    "https://example.com/unknown-post",
    "https://news.ycombinator.com/",
]


class BlogRaceUser(HttpUser):
    """Simulated user for load testing the summary form."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    @task(3)
    def load_page(self) -> None:
        """Render the form with the saved list - most common operation."""
        self.client.get("/")

    @task(2)
    def submit_url(self) -> None:
        """Submit a random URL through the HTMX form endpoint."""
        self.client.post("/summaries", data={"url": random.choice(SAMPLE_URLS)})

    @task(1)
    def list_summaries_json(self) -> None:
        """Fetch the saved list through the JSON API."""
        self.client.get("/api/v1/summaries")

    @task(1)
    def submit_blank_url(self) -> None:
        """Blank input is rejected without touching the stores."""
        self.client.post("/summaries", data={"url": "   "})
