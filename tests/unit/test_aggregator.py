"""Tests for the national aggregator."""

from datetime import datetime, timezone

import pytest

from app.models.reference import Party
from app.models.results import Result, ResultStatus
from app.reference import PARTIES, ReferenceData, default_reference
from app.services.results import ElectionConfig, aggregate, normalize_result

AS_OF = datetime(2026, 2, 12, 18, 0, tzinfo=timezone.utc)
CONFIG = ElectionConfig(total_seats=300, required_majority=151, total_registered_voters=1000)


def result(cid, votes, status="completed"):
    return normalize_result({"constituency_id": cid, "party_votes": votes, "status": status})


def run(results, parties=None, config=CONFIG):
    return aggregate(results, parties, config=config, as_of=AS_OF)


def by_id(seat_counts):
    return {sc.party_id: sc for sc in seat_counts}


class TestEmpty:
    def test_no_results(self):
        parties, alliances, summary = run([])
        assert parties == []
        assert [a.alliance_id for a in alliances] == ["bnp", "jamaat", "others"]
        assert all(a.seats == 0 and a.total_votes == 0 and a.vote_percentage == 0 for a in alliances)
        assert summary.declared_seats == 0
        assert summary.total_votes_cast == 0
        assert summary.national_turnout == 0
        assert summary.last_updated == AS_OF

    def test_no_registered_voters(self):
        _, _, summary = run([result("dhaka-1", {"bnp": 10})], config=ElectionConfig(total_registered_voters=0))
        assert summary.national_turnout == 0


class TestSeats:
    def test_completed_and_partial(self):
        results = [
            result("dhaka-1", {"bnp": 100, "al": 50}),
            result("dhaka-2", {"al": 80, "bnp": 60}, status="partial"),
        ]
        parties, _, summary = run(results)
        counts = by_id(parties)

        assert counts["bnp"].seats == 1
        assert counts["bnp"].leading_seats == 0
        assert counts["al"].seats == 0
        assert counts["al"].leading_seats == 1
        assert [sc.party_id for sc in parties] == ["bnp", "al"]
        assert summary.declared_seats == 1

    def test_pending_counts_votes_only(self):
        parties, _, summary = run([result("dhaka-1", {"al": 5}, status="pending")])
        assert by_id(parties)["al"].seats == 0
        assert by_id(parties)["al"].leading_seats == 0
        assert by_id(parties)["al"].total_votes == 5
        assert summary.declared_seats == 0

    def test_completed_without_votes_is_declared_without_winner(self):
        parties, _, summary = run([result("dhaka-1", {}, status="completed")])
        assert parties == []
        assert summary.declared_seats == 1

    def test_partial_without_votes_has_no_leader(self):
        parties, _, _ = run([result("dhaka-1", {"al": 0}, status="partial")])
        assert parties == []

    def test_leader_tie_broken_by_id(self):
        parties, _, _ = run([result("dhaka-1", {"bnp": 7, "al": 7}, status="partial")])
        assert by_id(parties)["al"].leading_seats == 1
        assert by_id(parties)["bnp"].leading_seats == 0

    def test_zero_activity_parties_filtered(self):
        parties, _, _ = run([result("dhaka-1", {"bnp": 10})])
        assert [sc.party_id for sc in parties] == ["bnp"]


class TestOrdering:
    def test_seats_then_votes_then_id(self):
        results = [
            result("dhaka-1", {"al": 10}),
            result("dhaka-2", {"bnp": 20}),
            result("dhaka-3", {"jamaat": 5, "ncp": 1}, status="partial"),
            result("dhaka-4", {"ncp": 5}, status="pending"),
        ]
        parties, _, _ = run(results)
        assert [sc.party_id for sc in parties] == ["bnp", "al", "ncp", "jamaat"]

    def test_identical_totals_sorted_by_id(self):
        parties, _, _ = run([result("dhaka-1", {"bnp": 5, "al": 5}, status="pending")])
        assert [sc.party_id for sc in parties] == ["al", "bnp"]


class TestAlliances:
    def test_roll_up(self):
        results = [
            result("dhaka-1", {"bnp": 100, "jamaat": 90}),
            result("dhaka-2", {"ncp": 70, "ldf": 30}),
            result("dhaka-3", {"jamaat": 40, "bnp": 10}, status="partial"),
            result("dhaka-4", {"independent": 50, "al": 20}),
        ]
        _, alliances, summary = run(results)
        a = {x.alliance_id: x for x in alliances}

        assert a["bnp"].seats == 1
        assert a["bnp"].total_votes == 140
        assert a["jamaat"].seats == 1
        assert a["jamaat"].leading_seats == 1
        assert a["jamaat"].total_votes == 200
        assert a["others"].seats == 1
        assert a["others"].total_votes == 70
        assert sum(x.total_votes for x in alliances) == summary.total_votes_cast
        assert a["jamaat"].vote_percentage == pytest.approx(200 / 410 * 100)

    def test_member_breakdown_sorted(self):
        results = [
            result("dhaka-1", {"ncp": 10}),
            result("dhaka-2", {"jamaat": 50}, status="partial"),
            result("dhaka-3", {"jamaat": 5, "ncp": 1}, status="pending"),
        ]
        _, alliances, _ = run(results)
        jamaat = next(x for x in alliances if x.alliance_id == "jamaat")
        assert [p.party_id for p in jamaat.parties] == ["ncp", "jamaat"]

    def test_independent_never_in_named_alliance(self):
        _, alliances, _ = run([result("dhaka-1", {"independent": 1000, "bnp": 10, "jamaat": 10})])
        a = {x.alliance_id: x for x in alliances}
        assert a["others"].seats == 1
        assert [p.party_id for p in a["others"].parties] == ["independent"]
        assert a["bnp"].seats == 0
        assert a["jamaat"].seats == 0

    def test_party_without_alliance_flagged_independent(self):
        ind = Party(id="ind-x", name="Indie", short_name="IX", color="#111", is_independent=True)
        ref = ReferenceData(parties=[*PARTIES, ind])
        r = normalize_result({"constituency_id": "dhaka-1", "party_votes": {"ind-x": 9}, "status": "completed"}, ref)
        _, alliances, _ = aggregate([r], reference=ref, config=CONFIG, as_of=AS_OF)
        assert next(x for x in alliances if x.alliance_id == "others").seats == 1


class TestFallbackBucket:
    def test_unknown_party_in_result_goes_to_other(self):
        r = Result(
            constituency_id="dhaka-1",
            party_votes={"mystery": 10, "bnp": 4},
            winner_party_id="mystery",
            total_votes=14,
            status=ResultStatus.COMPLETED,
        )
        parties, _, summary = run([r])
        counts = by_id(parties)
        assert "mystery" not in counts
        assert counts["other"].seats == 1
        assert counts["other"].total_votes == 10
        assert summary.total_votes_cast == 14

    def test_other_bucket_created_when_missing(self):
        bnp = default_reference.get_party("bnp")
        parties, alliances, _ = run([result("dhaka-1", {"al": 3, "bnp": 2})], parties=[bnp])
        counts = by_id(parties)
        assert counts["other"].total_votes == 3
        assert counts["bnp"].total_votes == 2
        others = next(x for x in alliances if x.alliance_id == "others")
        assert [p.party_id for p in others.parties] == ["other"]


class TestProperties:
    RESULTS = [
        ("dhaka-1", {"al": 50000, "bnp": 48000}, "completed"),
        ("dhaka-2", {"bnp": 30000, "jamaat": 29000, "Foo": 10}, "partial"),
        ("dhaka-3", {"independent": 2000, "ncp": 1500}, "completed"),
        ("dhaka-4", {}, "pending"),
        ("dhaka-5", {"jp-ershad": 12, "al": 12}, "completed"),
    ]

    def results(self):
        return [result(cid, votes, status) for cid, votes, status in self.RESULTS]

    def test_idempotent(self):
        first = run(self.results())
        second = run(self.results())
        assert [sc.to_dict() for sc in first[0]] == [sc.to_dict() for sc in second[0]]
        assert [a.to_dict() for a in first[1]] == [a.to_dict() for a in second[1]]
        assert first[2].to_dict() == second[2].to_dict()

    def test_input_order_irrelevant(self):
        forward = run(self.results())
        backward = run(list(reversed(self.results())))
        assert forward[2].to_dict() == backward[2].to_dict()

    def test_conservation(self):
        results = self.results()
        parties, _, summary = run(results)
        assert sum(sc.total_votes for sc in parties) == sum(r.total_votes for r in results)
        assert summary.total_votes_cast == sum(r.total_votes for r in results)

    def test_percentages(self):
        parties, alliances, summary = run(self.results())
        assert sum(sc.vote_percentage for sc in parties) == pytest.approx(100)
        assert sum(a.vote_percentage for a in alliances) == pytest.approx(100)
        assert summary.national_turnout == pytest.approx(summary.total_votes_cast / 1000 * 100)

    def test_summary_constants(self):
        _, _, summary = run(self.results())
        assert summary.total_seats == 300
        assert summary.required_majority == 151
        assert summary.total_registered_voters == 1000
        assert summary.party_seat_counts[0].party_id in {"al", "independent"}


class TestConfig:
    def test_from_settings(self):
        import settings

        cfg = ElectionConfig.from_settings()
        assert cfg.total_seats == settings.TOTAL_SEATS
        assert cfg.required_majority == settings.REQUIRED_MAJORITY
        assert cfg.total_registered_voters == settings.TOTAL_REGISTERED_VOTERS

    def test_default_timestamp_is_utc(self):
        _, _, summary = aggregate([], config=CONFIG)
        assert summary.last_updated.tzinfo is not None
