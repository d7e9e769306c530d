"""Application logic tying the domain objects to their text-file storage."""

from __future__ import annotations

import os
from pathlib import Path

from . import persistence
from .model import Administrator, Question, SecurityOperator, Warning

ADMIN_USERNAME = "user"
ADMIN_PASSWORD = "password"


class Controller:
    """Keeps users, questions, alarms and pending operators, saving every change.

    Each collection lives in memory and is written back to its file in
    ``directory`` whenever it changes. The ``query_all_*`` methods reload
    a collection from its file and raise ``FileNotFoundError`` if it is
    missing.
    """

    USERS_FILE = "usuarios.txt"
    REGISTRATION_FILE = "registrooperadores.txt"
    FAQ_FILE = "preguntasfrecuentes.txt"
    NEW_QUESTIONS_FILE = "preguntasnuevas.txt"
    ALARMS_FILE = "alarmas.txt"
    ZONES_FILE = "zonas.txt"

    def __init__(self, directory: str | os.PathLike = ".") -> None:
        self.directory = Path(directory)
        self._operators: list[SecurityOperator] = []
        self._questions: list[Question] = []
        self._alarms: list[Warning] = []
        self._pending: list[SecurityOperator] = []
        self._new_questions: list[str] = []

    def _path(self, name: str) -> Path:
        return self.directory / name

    # Administrator

    def validate_admin(self, administrator: Administrator) -> bool:
        """Return True if the administrator's credentials are the built-in ones."""
        return (
            administrator.username == ADMIN_USERNAME
            and administrator.password == ADMIN_PASSWORD
        )

    # Registered operators

    def add_user(self, operator: SecurityOperator) -> bool:
        """Register an operator and save the user file."""
        self._operators.append(operator)
        persistence.save_users(self._path(self.USERS_FILE), self._operators)
        return True

    def validate_operator(self, username: str, password: str) -> bool:
        """Return True if a registered operator has these credentials."""
        return any(
            op.username == username and op.password == password
            for op in self._operators
        )

    def delete_user(self, operator: SecurityOperator) -> bool:
        """Remove the first operator with the same username; False if none."""
        for index, existing in enumerate(self._operators):
            if existing.username == operator.username:
                del self._operators[index]
                persistence.save_users(self._path(self.USERS_FILE), self._operators)
                return True
        return False

    def query_user_by_username(self, username: str) -> SecurityOperator | None:
        """Find a registered operator by DNI, which serves as username."""
        return next((op for op in self._operators if op.dni == username), None)

    def query_all_users(self) -> list[SecurityOperator]:
        """Reload registered operators from their file."""
        self._operators = persistence.load_users(self._path(self.USERS_FILE))
        return list(self._operators)

    # Frequently asked questions

    def add_question(self, question: Question) -> bool:
        """Add a FAQ entry; False if its question text is already present."""
        if any(q.text == question.text for q in self._questions):
            return False
        self._questions.append(question)
        self._save_questions()
        return True

    def delete_question(self, text: str) -> None:
        """Remove every FAQ entry with this question text."""
        kept = [q for q in self._questions if q.text != text]
        if len(kept) != len(self._questions):
            self._questions = kept
            self._save_questions()

    def update_question(self, question: Question) -> bool:
        """Replace the entry with the same question text; False if none."""
        for index, existing in enumerate(self._questions):
            if existing.text == question.text:
                self._questions[index] = question
                self._save_questions()
                return True
        return False

    def query_all_faq(self) -> list[Question]:
        """Reload FAQ entries from their file."""
        self._questions = persistence.load_questions(self._path(self.FAQ_FILE))
        return list(self._questions)

    def query_all_only_questions(self) -> list[str]:
        """Return the question texts of the FAQ, in order."""
        return [q.text for q in self._questions]

    def query_answer_by_question(self, text: str) -> str | None:
        """Return the answer to a question, or None if it is not in the FAQ."""
        return next((q.answer for q in self._questions if q.text == text), None)

    def _save_questions(self) -> None:
        persistence.save_questions(self._path(self.FAQ_FILE), self._questions)

    # Alarm history

    def add_warning(self, warning: Warning) -> bool:
        """Record an alarm and save the alarm history."""
        self._alarms.append(warning)
        persistence.save_alarms(self._path(self.ALARMS_FILE), self._alarms)
        return True

    def query_all_warnings(self) -> list[Warning]:
        """Reload the alarm history from its file."""
        self._alarms = persistence.load_alarms(self._path(self.ALARMS_FILE))
        return list(self._alarms)

    # Operators awaiting validation

    def add_operator_to_validation(self, operator: SecurityOperator) -> bool:
        """Queue an operator for validation and save the queue."""
        self._pending.append(operator)
        self._save_pending()
        return True

    def delete_operator_to_validation(self, dni: str) -> None:
        """Remove every queued operator with this DNI."""
        kept = [op for op in self._pending if op.dni != dni]
        if len(kept) != len(self._pending):
            self._pending = kept
            self._save_pending()

    def query_pending_operator_by_dni(self, dni: str) -> SecurityOperator | None:
        """Find a queued operator by DNI."""
        return next((op for op in self._pending if op.dni == dni), None)

    def query_all_pending_operators(self) -> list[SecurityOperator]:
        """Reload the validation queue from its file."""
        self._pending = persistence.load_pending_operators(
            self._path(self.REGISTRATION_FILE)
        )
        return list(self._pending)

    def _save_pending(self) -> None:
        persistence.save_pending_operators(
            self._path(self.REGISTRATION_FILE), self._pending
        )

    # Questions asked by clients that have no answer yet

    def add_new_question(self, text: str) -> bool:
        """Record a client's question and save the list."""
        self._new_questions.append(text)
        self._save_new_questions()
        return True

    def delete_new_question(self, text: str) -> None:
        """Remove every occurrence of this question."""
        kept = [q for q in self._new_questions if q != text]
        if len(kept) != len(self._new_questions):
            self._new_questions = kept
            self._save_new_questions()

    def query_all_new_questions(self) -> list[str]:
        """Reload the clients' questions from their file."""
        self._new_questions = persistence.load_new_questions(
            self._path(self.NEW_QUESTIONS_FILE)
        )
        return list(self._new_questions)

    def _save_new_questions(self) -> None:
        persistence.save_new_questions(
            self._path(self.NEW_QUESTIONS_FILE), self._new_questions
        )