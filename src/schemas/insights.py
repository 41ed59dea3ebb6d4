from __future__ import annotations

from datetime import date
from typing import Optional

from src.shared.base import BaseSchema


class InsightQuestionRequest(BaseSchema):
    question: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class InsightAnswer(BaseSchema):
    question: str
    answer_markdown: str
    answer_html: str
    booking_count: int
