"""
Calculator state owned by one UI: expression buffer, angle mode, memory
register and history. All mutation goes through the methods below.
"""

import logging
from collections import deque
from typing import List, NamedTuple, Optional

from .display import format_result
from .environment import AngleMode
from .errors import EvalError
from .evaluator import evaluate
from .settings import DEFAULT_HISTORY_CAPACITY, Settings

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"


class HistoryEntry(NamedTuple):
    expression: str
    result: str

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"


class History:
    """Bounded, most-recent-first list of evaluations."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("history capacity must be >= 1")
        self.capacity = capacity
        self._entries = deque(maxlen=capacity)

    def push(self, expression: str, result: str) -> HistoryEntry:
        entry = HistoryEntry(expression, result)
        if len(self._entries) == self.capacity:
            logger.debug("history full, dropping %s", self._entries[-1])
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


class Memory:
    def __init__(self):
        self.value = 0.0

    def add(self, v: float) -> None:
        self.value += v

    def subtract(self, v: float) -> None:
        self.value -= v

    def clear(self) -> None:
        self.value = 0.0

    def recall(self) -> str:
        return format_result(self.value)


class CalculatorSession:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.settings.validate()
        self.angle_mode = self.settings.angle_mode
        self.expression = ""
        self.last_result = ""
        self.memory = Memory()
        self.history = History(self.settings.history_capacity)

    # ----------------------------
    # Expression buffer
    # ----------------------------
    def append(self, token: str) -> None:
        self.expression += token

    def backspace(self) -> None:
        self.expression = self.expression[:-1]

    def clear(self) -> None:
        self.expression = ""
        self.last_result = ""

    def toggle_angle_mode(self) -> AngleMode:
        self.angle_mode = self.angle_mode.toggled()
        logger.debug("angle mode -> %s", self.angle_mode.label)
        return self.angle_mode

    # ----------------------------
    # Evaluation
    # ----------------------------
    def compute(self) -> str:
        """Evaluate the buffer; on success the result replaces it."""
        expr = self.expression
        if not expr.strip():
            return self.last_result
        try:
            value = evaluate(expr, self.angle_mode)
        except EvalError:
            self.last_result = ERROR_TEXT
            self.history.push(expr, ERROR_TEXT)
            return self.last_result
        self.last_result = format_result(value)
        self.history.push(expr, self.last_result)
        self.expression = self.last_result
        return self.last_result

    def load_history(self, index: int) -> HistoryEntry:
        entry = self.history[index]
        self.expression = entry.expression
        self.last_result = entry.result
        return entry

    # ----------------------------
    # Memory operations
    # ----------------------------
    def _memory_operand(self) -> Optional[float]:
        try:
            return evaluate(self.expression or self.last_result, self.angle_mode)
        except EvalError as exc:
            logger.debug("memory update skipped: %s", exc)
            return None

    def mem_add(self) -> None:
        v = self._memory_operand()
        if v is not None:
            self.memory.add(v)

    def mem_sub(self) -> None:
        v = self._memory_operand()
        if v is not None:
            self.memory.subtract(v)

    def mem_recall(self) -> None:
        self.append(self.memory.recall())

    def mem_clear(self) -> None:
        self.memory.clear()
