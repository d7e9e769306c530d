from datetime import datetime

import pytest

from mallsecurity.model import Question, SecurityOperator, Warning
from mallsecurity.persistence import (
    load_alarms,
    load_new_questions,
    load_pending_operators,
    load_questions,
    load_users,
    save_alarms,
    save_new_questions,
    save_pending_operators,
    save_questions,
    save_users,
)

password = "password"


@pytest.fixture
def operators():
    return [
        SecurityOperator("Ana", "Diaz", "D001", password),
        SecurityOperator("Luis", "Rojas", "D002", password),
    ]


def test_users_round_trip(tmp_path, operators):
    path = tmp_path / "users.txt"
    save_users(path, operators)
    assert load_users(path) == operators


def test_users_file_format(tmp_path, operators):
    path = tmp_path / "users.txt"
    save_users(path, operators[:1])
    assert path.read_text(encoding="utf-8") == "Ana|Diaz|D001|password\n"


def test_loaded_users_are_unauthorized(tmp_path, operators):
    path = tmp_path / "users.txt"
    operators[0].authorized = True
    save_users(path, operators)
    assert all(op.authorized is False for op in load_users(path))


def test_pending_operators_round_trip(tmp_path, operators):
    path = tmp_path / "pending.txt"
    save_pending_operators(path, operators)
    loaded = load_pending_operators(path)
    assert [op.dni for op in loaded] == ["D001", "D002"]
    assert loaded == operators


def test_save_overwrites(tmp_path, operators):
    path = tmp_path / "users.txt"
    save_users(path, operators)
    save_users(path, operators[1:])
    assert load_users(path) == operators[1:]


def test_empty_list_round_trip(tmp_path):
    path = tmp_path / "users.txt"
    save_users(path, [])
    assert load_users(path) == []


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_users(tmp_path / "absent.txt")


def test_malformed_user_line(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text("Ana|Diaz\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_users(path)


def test_alarms_round_trip(tmp_path):
    path = tmp_path / "alarms.txt"
    alarms = [
        Warning("fire", datetime(2025, 5, 1, 10, 0), datetime(2025, 5, 1, 10, 30)),
        Warning("intrusion", datetime(2025, 5, 2, 22, 15, 5), None),
    ]
    save_alarms(path, alarms)
    assert load_alarms(path) == alarms


def test_alarm_bad_date(tmp_path):
    path = tmp_path / "alarms.txt"
    path.write_text("fire|not a date|\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_alarms(path)


def test_questions_round_trip(tmp_path):
    path = tmp_path / "faq.txt"
    questions = [Question("Where is parking?", "Level -1"), Question("Hours?", "9-22")]
    save_questions(path, questions)
    assert load_questions(path) == questions


def test_questions_extra_fields_ignored(tmp_path):
    path = tmp_path / "faq.txt"
    path.write_text("a|b|c\n", encoding="utf-8")
    assert load_questions(path) == [Question("a", "b")]


def test_question_without_answer_is_malformed(tmp_path):
    path = tmp_path / "faq.txt"
    path.write_text("only a question\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_questions(path)


def test_new_questions_round_trip(tmp_path):
    path = tmp_path / "new.txt"
    save_new_questions(path, ["Is there wifi?", "Where is the bank?"])
    assert load_new_questions(path) == ["Is there wifi?", "Where is the bank?"]


def test_new_questions_keep_text_before_separator(tmp_path):
    path = tmp_path / "new.txt"
    path.write_text("x|y\n", encoding="utf-8")
    assert load_new_questions(path) == ["x"]