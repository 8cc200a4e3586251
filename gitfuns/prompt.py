"""Yes/no prompting."""

import re
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

logger = logging.getLogger(__name__)

NEGATIVE_ANSWER = re.compile(r'^[nN][oO]?$')


def is_negative_answer(answer: str) -> bool:
    """Only n, N, no, NO (and mixed-case no) decline; anything else accepts."""
    return bool(NEGATIVE_ANSWER.match(answer.strip()))


class Prompter(ABC):
    """Asks the user [Y/n] questions."""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask a question and return True unless the user declines."""
        pass


class ConsolePrompter(Prompter):
    """Reads answers from standard input."""

    def confirm(self, question: str) -> bool:
        try:
            answer = input(f"{question} [Y/n] ")
        except EOFError:
            # An empty read counts as the default answer
            print()
            answer = ""
        return not is_negative_answer(answer)


class ScriptedPrompter(Prompter):
    """Replays canned answers, for tests and non-interactive use."""

    def __init__(self, answers: Iterable[str] = ()):
        self.answers = list(answers)
        self.questions: List[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        answer = self.answers.pop(0) if self.answers else ""
        logger.debug("Scripted answer %r to %r", answer, question)
        return not is_negative_answer(answer)
