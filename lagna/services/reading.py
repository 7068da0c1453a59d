"""Natural-language chart reading built on top of a computed chart."""

from __future__ import annotations

import json

from . import llm_client
from .models import Chart

SYSTEM_PROMPT = "You are a kind and insightful Vedic astrologer."


def build_reading_prompt(chart: Chart) -> str:
    data = json.dumps(chart.to_dict(), indent=2, ensure_ascii=False)
    return (
        "You are an expert Vedic astrologer. Based on the following planetary and ascendant data,\n"
        "write a personal astrology reading in natural, poetic language (avoid technical jargon).\n"
        "Some values may be null when they could not be computed; do not invent them.\n\n"
        "--- DATA ---\n"
        f"{data}\n"
        "--- END DATA ---\n"
    )


async def generate_reading(chart: Chart) -> str:
    return await llm_client.generate_text(SYSTEM_PROMPT, build_reading_prompt(chart), temperature=0.8)
