from citizen_connect.core.models import Activity
from citizen_connect.data.repositories import (
    ActivityRepository,
    IssueRepository,
    PoliticianRepository,
)
from citizen_connect.data.seed import seed_issues, seed_politicians


def test_seed_only_once():
    repo = PoliticianRepository()
    assert repo.seed(seed_politicians()) is True
    assert repo.seed(seed_politicians()) is False
    assert len(repo) == 3
    assert [p.name for p in repo] == [
        "Mayor Robert Johnson",
        "Sarah Davis",
        "Carlos Martinez",
    ]


def test_issue_add_prepends():
    repo = IssueRepository()
    repo.seed(seed_issues())
    new = seed_issues()[2].model_copy(update={"id": "new", "title": "Newest"})
    repo.add(new)
    assert repo.all()[0].id == "new"
    assert len(repo) == 4


def test_increment_votes():
    repo = IssueRepository()
    repo.seed(seed_issues())
    target = repo.all()[1]
    assert repo.increment_votes(target.id) is True
    assert repo.increment_votes(target.id) is True
    assert repo.get(target.id).votes == 67 + 2


def test_increment_votes_unknown_id_is_noop():
    repo = IssueRepository()
    repo.seed(seed_issues())
    before = [i.votes for i in repo]
    assert repo.increment_votes("missing") is False
    assert [i.votes for i in repo] == before


def test_activity_cap_drops_oldest():
    repo = ActivityRepository()
    for n in range(11):
        repo.add(Activity(description=f"event {n}", time="Just now"))
    assert len(repo) == 10
    descriptions = [a.description for a in repo]
    assert descriptions[0] == "event 10"
    assert descriptions[-1] == "event 1"
    assert "event 0" not in descriptions


def test_activity_custom_limit():
    repo = ActivityRepository(limit=2)
    for n in range(3):
        repo.add(Activity(description=str(n), time="now"))
    assert [a.description for a in repo] == ["2", "1"]


def test_get_missing_returns_none():
    assert IssueRepository().get("nope") is None
