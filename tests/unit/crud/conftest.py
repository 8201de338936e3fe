"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.models import Author, Document


DEVELOPER_ID = "3ae1a0fb-6c6b-40bb-93e7-29fe5473d095"


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty in-memory store."""
    return MemoryRepo()


@pytest.fixture(name="now")
def now_fixture():
    return datetime.now(timezone.utc)


@pytest.fixture(name="five_docs")
def five_docs_fixture(repo, now):
    """Five project documents spread over four weeks; two by the developer."""
    customer = Author(id=str(uuid4()), name="Замовник")
    team_lead = Author(id=str(uuid4()), name="Тімлід")
    developer = Author(id=DEVELOPER_ID, name="Розробник")
    docs = [
        Document(title="Опис проекта", content="Проект призначений для поліпшення життя людей",
                 author=customer, created=now - timedelta(weeks=4)),
        Document(title="Технічне завдання", content="Розробити проект для поліпшення життя людей",
                 author=customer, created=now - timedelta(weeks=3)),
        Document(title="План виконання проекта",
                 content="1) Розробка макету - 1 тиждень. 2) Додавання нових фіч - 4 тижні. "
                         "3) Тестування - 2 тижні. 4) Введення в експлуатацію - 1 тиждень.",
                 author=team_lead, created=now - timedelta(weeks=2)),
        Document(title="Опис фічі №1", content="Виконує багато корисного",
                 author=developer, created=now - timedelta(weeks=1)),
        Document(title="Опис фічі №2", content="Виконує багато корисного",
                 author=developer, created=now),
    ]
    for d in docs:
        repo.save(d)
    return docs


@pytest.fixture(name="developer_id")
def developer_id_fixture():
    return DEVELOPER_ID
