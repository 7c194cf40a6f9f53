"""Schema bootstrap only touches SQL providers."""

from protean.domain import Domain
from shared import db


def test_memory_providers_are_skipped(monkeypatch):
    calls = []
    monkeypatch.setattr(db, "create_engine", lambda uri: calls.append(uri))

    domain = Domain(name="scratch")
    domain.init(traverse=False)

    db.setup_db(domain)
    db.drop_db(domain)

    assert calls == []
