"""Unit tests for the aggregation loop."""

from unittest.mock import MagicMock, patch

import pytest

from ..errors import InvalidInputError, NetworkFailure, RemoteError
from ..models import PageCursor, RateSnapshot, RepoItem, RepoOwner, StarredPage
from .aggregate import aggregate_all

FETCH_PAGE = "github_stars_exporter.fetch_starred.aggregate.fetch_page"


def _item(i):
    return RepoItem(
        id=i,
        full_name=f"owner/repo{i}",
        url=f"https://github.com/owner/repo{i}",
        description=None,
        star_count=i,
        primary_language=None,
        owner=RepoOwner(login="owner", avatar_url="", url="https://github.com/owner"),
    )


def _chain(pages, errors=None):
    """Fake fetch_page serving ``pages``: page number -> (item ids, next page or None).

    ``errors`` maps page number -> exception to raise instead.
    """
    errors = errors or {}

    def fake_fetch_page(subject, page=1, per_page=100, client=None, skip_cache=False):
        if page in errors:
            raise errors[page]
        ids, next_page = pages[page]
        return StarredPage(
            items=[_item(i) for i in ids],
            cursor=PageCursor(next=next_page),
            rate=RateSnapshot(limit=60, remaining=60 - page, reset=1000 + page),
        )

    return MagicMock(side_effect=fake_fetch_page)


def describe_aggregate_all():
    def it_concatenates_pages_in_order():
        fake = _chain({1: ([1, 2], 2), 2: ([3, 4], 3), 3: ([5], None)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock())

        assert [item.id for item in result.items] == [1, 2, 3, 4, 5]
        assert result.pages_fetched == 3
        assert result.truncated is False
        assert fake.call_count == 3

    def it_follows_next_pointers_not_sequential_numbers():
        fake = _chain({1: ([1], 4), 4: ([2], 9), 9: ([3], None)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock())

        assert [item.id for item in result.items] == [1, 2, 3]
        assert [c.kwargs["page"] for c in fake.call_args_list] == [1, 4, 9]

    def it_keeps_latest_rate_snapshot():
        fake = _chain({1: ([1], 2), 2: ([2], None)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock())

        assert result.rate == RateSnapshot(limit=60, remaining=58, reset=1002)

    def it_keeps_duplicates_across_pages():
        fake = _chain({1: ([1, 2], 2), 2: ([2, 3], None)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock())

        assert [item.id for item in result.items] == [1, 2, 2, 3]

    def it_handles_single_empty_page():
        fake = _chain({1: ([], None)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock())

        assert result.items == []
        assert result.pages_fetched == 1
        assert result.truncated is False

    def it_stops_cyclic_chain_at_page_cap():
        # page 1 -> 2 -> 1 -> 2 ... forever
        fake = _chain({1: ([1], 2), 2: ([2], 1)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock(), page_cap=5)

        assert fake.call_count == 5
        assert result.pages_fetched == 5
        assert result.truncated is True
        assert [item.id for item in result.items] == [1, 2, 1, 2, 1]

    def it_uses_default_cap_of_100():
        fake = _chain({1: ([1], 1)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock())

        assert fake.call_count == 100
        assert result.truncated is True

    def it_does_not_flag_truncation_when_chain_ends_at_cap():
        fake = _chain({1: ([1], 2), 2: ([2], 3), 3: ([3], None)})

        with patch(FETCH_PAGE, fake):
            result = aggregate_all("octocat", client=MagicMock(), page_cap=3)

        assert fake.call_count == 3
        assert result.truncated is False

    def it_propagates_failure_from_a_middle_page():
        error = RemoteError(500, "boom")
        fake = _chain(
            {1: ([1], 2), 2: ([2], 3), 4: ([4], 5), 5: ([5], None)},
            errors={3: error},
        )

        with patch(FETCH_PAGE, fake):
            with pytest.raises(RemoteError) as exc:
                aggregate_all("octocat", client=MagicMock())

        assert exc.value is error
        assert exc.value.status == 500
        assert fake.call_count == 3
        # Earlier pages are diagnostics on the error, not a result
        assert exc.value.pages_fetched == 2
        assert [item.id for item in exc.value.collected] == [1, 2]

    def it_propagates_network_failure():
        fake = _chain({}, errors={1: NetworkFailure("connection reset")})

        with patch(FETCH_PAGE, fake):
            with pytest.raises(NetworkFailure, match="connection reset"):
                aggregate_all("octocat", client=MagicMock())

    def it_rejects_invalid_input_before_fetching():
        fake = _chain({1: ([1], None)})

        with patch(FETCH_PAGE, fake):
            with pytest.raises(InvalidInputError):
                aggregate_all("  ", client=MagicMock())
            with pytest.raises(InvalidInputError):
                aggregate_all("octocat", client=MagicMock(), per_page=101)
            with pytest.raises(InvalidInputError):
                aggregate_all("octocat", client=MagicMock(), page_cap=0)

        fake.assert_not_called()

    def it_requests_the_given_page_size_and_trimmed_subject():
        fake = _chain({1: ([1], None)})
        client = MagicMock()

        with patch(FETCH_PAGE, fake):
            aggregate_all(" octocat ", client=client, per_page=50)

        fake.assert_called_once_with("octocat", page=1, per_page=50, client=client, skip_cache=True)
