# SPDX-License-Identifier: MIT

from tasktracker.repository.tag import TAG_REPO
from tasktracker.service import tag as tag_service
from tasktracker.service.task import create_task, delete_task


def test_split_tag_input_trims_and_drops_empty_pieces() -> None:
    assert tag_service.split_tag_input(" urgent, ,client-X ,urgent,") == [
        "urgent",
        "client-X",
    ]


def test_ensure_tags_registers_new_tags_in_input_order() -> None:
    names = tag_service.ensure_tags("refactor, urgent, refactor")

    assert names == ["refactor", "urgent"]
    assert TAG_REPO.tag_exists("refactor")
    assert TAG_REPO.tag_exists("urgent")


def test_ensure_tags_reuses_existing_spelling_ignoring_case() -> None:
    tag_service.ensure_tags("Client-X")

    names = tag_service.ensure_tags("client-x, CLIENT-X, review")

    assert names == ["Client-X", "review"]
    assert tag_service.all_tag_names() == ["Client-X", "review"]


def test_ensure_tags_with_blank_input_returns_nothing() -> None:
    assert tag_service.ensure_tags(" , ") == []
    assert tag_service.all_tag_names() == []


def test_all_tag_names_sorts_case_insensitively() -> None:
    TAG_REPO.add_tags(["beta", "Alpha", "gamma", "Delta"])

    assert tag_service.all_tag_names() == ["Alpha", "beta", "Delta", "gamma"]


def test_names_differing_only_in_case_are_distinct_when_stored() -> None:
    TAG_REPO.add_tags(["urgent", "Urgent"])

    assert len(tag_service.all_tag_names()) == 2
    assert tag_service.find_tag("urgent") == "urgent"
    assert tag_service.find_tag("Urgent") == "Urgent"


def test_append_tag_merges_and_sorts() -> None:
    assert tag_service.append_tag("urgent, client-X", "api") == "api, client-X, urgent"
    assert tag_service.append_tag("urgent", "urgent") == "urgent"
    assert tag_service.append_tag("", "api") == "api"


def test_suggest_tags_matches_prefix_ignoring_case() -> None:
    TAG_REPO.add_tags(["Release", "refactor", "urgent"])

    assert tag_service.suggest_tags("re") == ["refactor", "Release"]
    assert tag_service.suggest_tags("") == ["refactor", "Release", "urgent"]


def test_tag_usage_and_sync() -> None:
    kept = create_task("keep", tags_input="home, errands")
    dropped = create_task("drop", tags_input="work")
    create_task("also home", tags_input="home")

    assert tag_service.tag_usage() == {"errands": 1, "home": 2, "work": 1}

    delete_task(dropped)
    tag_service.sync_tags()

    assert tag_service.all_tag_names() == ["errands", "home"]
    assert kept is not None
