"""Tests for the per-constituency normalizer."""

import pytest

from app.models.reference import Party
from app.models.results import ResultStatus, VoteTally
from app.reference import ReferenceData
from app.services.results import InvalidTallyError, normalize_result, validate_tally


def tally(votes, status="completed", cid="dhaka-1"):
    return {"constituency_id": cid, "party_votes": votes, "status": status}


class TestWinnerAndMargin:
    def test_close_race(self):
        r = normalize_result(tally({"al": 50000, "bnp": 48000}))
        assert r.winner_party_id == "al"
        assert r.runner_up_party_id == "bnp"
        assert r.margin == 2000
        assert r.margin_percentage == pytest.approx(2000 / 98000 * 100)
        assert r.total_votes == 98000

    def test_unopposed(self):
        r = normalize_result(tally({"bnp": 500}))
        assert r.margin == 500
        assert r.margin_percentage == 100.0

    def test_tie_broken_by_id(self):
        r = normalize_result(tally({"bnp": 100, "al": 100}))
        assert r.winner_party_id == "al"
        assert r.margin == 0

    def test_only_one_party_with_votes(self):
        r = normalize_result(tally({"bnp": 100, "al": 0}))
        assert r.margin == 100
        assert r.runner_up_party_id is None

    def test_partial_has_no_winner(self):
        r = normalize_result(tally({"al": 10, "bnp": 20}, status="partial"))
        assert r.winner_party_id is None
        assert r.winner_alliance_id is None
        assert r.margin == 10

    def test_completed_with_zero_votes_has_no_winner(self):
        r = normalize_result(tally({"al": 0}))
        assert r.status == ResultStatus.COMPLETED
        assert r.winner_party_id is None

    def test_party_votes_ordered_by_rank(self):
        r = normalize_result(tally({"al": 1, "jamaat": 3, "bnp": 2}))
        assert list(r.party_votes) == ["jamaat", "bnp", "al"]


class TestEmpty:
    def test_pending_without_votes(self):
        r = normalize_result(tally({}, status="pending"))
        assert r.total_votes == 0
        assert r.winner_party_id is None
        assert r.margin == 0
        assert r.margin_percentage == 0
        assert r.alliance_votes == {"bnp": 0, "jamaat": 0, "others": 0}
        assert r.status == ResultStatus.PENDING

    def test_status_kept(self):
        assert normalize_result(tally({}, status="completed")).status == ResultStatus.COMPLETED

    def test_missing_fields_default(self):
        r = normalize_result({"constituency_id": "dhaka-2"})
        assert r.status == ResultStatus.PENDING
        assert r.party_votes == {}


class TestKeyNormalization:
    def test_full_name_merges_with_id(self):
        r = normalize_result(tally({"Bangladesh Nationalist Party": 100, "bnp": 50, "al": 20}))
        assert r.party_votes == {"bnp": 150, "al": 20}
        assert r.total_votes == 170

    def test_unknown_keys_go_to_other(self):
        r = normalize_result(tally({"Foo Party": 5, "Bar League": 7}))
        assert r.party_votes == {"other": 12}
        assert r.winner_party_id == "other"
        assert r.winner_alliance_id == "others"

    def test_constituency_id_normalized(self):
        r = normalize_result(tally({}, cid="Cox's Bazar-1"))
        assert r.constituency_id == "coxs-bazar-1"

    def test_camel_case_document(self):
        r = normalize_result(
            {"constituencyId": "dhaka-3", "partyVotes": {"al": 3}, "status": "completed", "updatedBy": "admin"}
        )
        assert r.winner_party_id == "al"
        assert r.updated_by == "admin"

    def test_field_names_and_aliases(self):
        assert VoteTally.model_config["populate_by_name"] is True
        by_name = VoteTally(constituency_id="dhaka-4", party_votes={"bnp": 1}, updated_by="admin")
        by_alias = VoteTally(constituencyId="dhaka-4", partyVotes={"bnp": 1}, updatedBy="admin")
        assert by_name == by_alias

    def test_accepts_model(self):
        r = normalize_result(VoteTally(constituency_id="dhaka-4", party_votes={"bnp": 1}, status="completed"))
        assert r.winner_party_id == "bnp"


class TestAllianceVotes:
    def test_roll_up(self):
        r = normalize_result(tally({"jamaat": 10, "ncp": 5, "bnp": 12, "al": 4, "independent": 1}))
        assert r.alliance_votes == {"bnp": 12, "jamaat": 15, "others": 5}
        assert r.winner_alliance_id == "bnp"

    def test_partition(self):
        r = normalize_result(tally({"jamaat": 10, "Foo": 5, "ldf": 7, "independent": 9}))
        assert sum(r.alliance_votes.values()) == r.total_votes

    def test_independent_winner_in_others(self):
        r = normalize_result(tally({"independent": 900, "bnp": 100}))
        assert r.winner_alliance_id == "others"

    def test_custom_reference(self):
        ref = ReferenceData(
            parties=[
                Party(id="x", name="X Party", short_name="X", color="#000", alliance_id="jamaat"),
                Party(id="other", name="Others", short_name="OTH", color="#999"),
            ]
        )
        r = normalize_result(tally({"X Party": 4, "bnp": 2}), ref)
        assert r.party_votes == {"x": 4, "other": 2}
        assert r.alliance_votes == {"bnp": 0, "jamaat": 4, "others": 2}


class TestValidation:
    def test_negative_rejected(self):
        with pytest.raises(InvalidTallyError) as exc:
            validate_tally(tally({"bnp": -1, "al": 5}))
        assert exc.value.constituency_id == "dhaka-1"
        assert any("bnp" in p for p in exc.value.problems)

    @pytest.mark.parametrize("bad", [1.5, "10", True, None])
    def test_non_integer_rejected(self, bad):
        with pytest.raises(InvalidTallyError):
            validate_tally(tally({"bnp": bad}))

    def test_unknown_status_rejected(self):
        with pytest.raises(InvalidTallyError):
            validate_tally(tally({}, status="finished"))

    def test_legacy_counting_status(self):
        assert validate_tally(tally({}, status="counting")).status == ResultStatus.PARTIAL

    def test_status_case_insensitive(self):
        assert validate_tally(tally({}, status=" Completed ")).status == ResultStatus.COMPLETED

    def test_blank_constituency_rejected(self):
        with pytest.raises(InvalidTallyError):
            validate_tally(tally({}, cid="  "))

    def test_normalize_rejects_too(self):
        with pytest.raises(InvalidTallyError):
            normalize_result(tally({"bnp": -5}))

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_tally(tally({"bnp": -5}))


class TestProperties:
    TALLIES = [
        {"al": 50000, "bnp": 48000},
        {"bnp": 10},
        {},
        {"jamaat": 3, "ncp": 3, "Foo": 9},
        {"independent": 0, "al": 0},
    ]

    @pytest.mark.parametrize("votes", TALLIES)
    @pytest.mark.parametrize("status", ["pending", "partial", "completed"])
    def test_invariants(self, votes, status):
        r = normalize_result(tally(votes, status=status))
        assert r.total_votes == sum(r.party_votes.values())
        assert 0 <= r.margin <= r.total_votes
        assert sum(r.alliance_votes.values()) == r.total_votes
        has_votes = r.total_votes > 0
        assert (r.winner_party_id is not None) == (status == "completed" and has_votes)
