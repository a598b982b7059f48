"""JSON formatter for ts-quality."""

import json
from typing import Sequence

from ..models import ScoreResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render results as a JSON array, one object per file."""

    def format(self, results: Sequence[ScoreResult]) -> str:
        data = [r.to_dict() for r in results]
        return json.dumps(data, indent=2)
