from __future__ import annotations

import json
from typing import Any, Dict, Optional, Sequence

from src.core.errors import BadRequestError, UpstreamError
from src.core.gemini import GeminiClient
from src.models.bookings import BookingRecord
from src.schemas.insights import InsightAnswer
from src.shared.markdown import render_markdown


SYSTEM_PROMPT = (
    "You are a vacation rental data analyst. Your task is to answer questions based ONLY "
    "on the provided booking data. Do not make up information. If the data does not "
    "contain the answer, state that clearly. Be concise and direct in your answers. "
    "**Format your response using markdown with paragraphs, bold headings, and bullet "
    "points for clarity.**"
)

USER_QUERY_TEMPLATE = """Here is the booking data for the selected period in JSON format:
{data}

---
Please answer the following question based on the data above:
"{question}"
"""


class InsightsService:
    def __init__(self, client: GeminiClient) -> None:
        self.client = client

    def forward(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.generate_content(payload)

    def ask(self, question: str, bookings: Sequence[BookingRecord]) -> InsightAnswer:
        question = question.strip()
        if not question:
            raise BadRequestError("Please enter a question.")
        if not bookings:
            raise BadRequestError(
                "No booking data available in the selected date range to analyze."
            )

        response = self.client.generate_content(self.build_payload(question, bookings))
        text = self._extract_text(response)
        if not text:
            raise UpstreamError("Received an empty response from the AI.")
        return InsightAnswer(
            question=question,
            answer_markdown=text,
            answer_html=render_markdown(text),
            booking_count=len(bookings),
        )

    def build_payload(self, question: str, bookings: Sequence[BookingRecord]) -> Dict[str, Any]:
        data = json.dumps([self.simplify_booking(booking) for booking in bookings], indent=2)
        user_query = USER_QUERY_TEMPLATE.format(data=data, question=question)
        return {
            "contents": [{"parts": [{"text": user_query}]}],
            "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
        }

    @staticmethod
    def simplify_booking(booking: BookingRecord) -> Dict[str, Any]:
        return {
            "arrival": booking.arrival_date.isoformat() if booking.arrival_date else None,
            "departure": booking.departure_date.isoformat() if booking.departure_date else None,
            "nights": booking.nights,
            "total_amount": booking.total_amount,
            "source": booking.source,
            "status": booking.status,
            "creation_date": (
                booking.creation_date.isoformat() if booking.creation_date else None
            ),
        }

    @staticmethod
    def _extract_text(response: Dict[str, Any]) -> Optional[str]:
        candidates = response.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return None
        content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
            return None
        text = parts[0].get("text")
        return text if isinstance(text, str) else None
