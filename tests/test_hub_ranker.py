"""Tests for the hub ranking algorithm."""

import pytest

from config.ranking_weights import RankingWeights
from models.hub import FilterCriteria, HubMetrics
from scoring.hub_ranker import (
    NoData,
    Scored,
    rank_hubs,
    resolve,
    score_budget,
    score_commute,
    score_hub,
    score_inventory,
    score_response,
)


def make_hub(hub_id="hub-1", **overrides) -> HubMetrics:
    fields = {
        "hub_id": hub_id,
        "jobsite_id": "site-1",
        "hub_name": hub_id,
        "commute_min": 0,
        "commute_max": 10,
    }
    fields.update(overrides)
    return HubMetrics(**fields)


def rent_hub(mid: float) -> HubMetrics:
    return make_hub(median_rent_min=mid, median_rent_max=mid)


USER_MID_900 = FilterCriteria(budget_min=800, budget_max=1000, commute_max=60)
NO_BUDGET = FilterCriteria(commute_max=60)


class TestEligibility:
    def test_only_hubs_under_ceiling_survive(self):
        hubs = [
            make_hub("a", commute_min=10, commute_max=20),
            make_hub("b", commute_min=10, commute_max=35),
            make_hub("c", commute_min=10, commute_max=50),
        ]
        ranked = rank_hubs(hubs, FilterCriteria(commute_max=30))
        assert [h.hub_id for h in ranked] == ["a"]

    def test_band_upper_bound_is_compared(self):
        """A 20-45 min hub is out under a 30 min ceiling despite its lower bound."""
        hubs = [make_hub(commute_min=20, commute_max=45)]
        assert rank_hubs(hubs, FilterCriteria(commute_max=30)) == []

    def test_ceiling_is_inclusive(self):
        hubs = [make_hub(commute_min=10, commute_max=30)]
        assert len(rank_hubs(hubs, FilterCriteria(commute_max=30))) == 1

    def test_non_positive_ceiling_filters_everything(self):
        hubs = [make_hub(commute_min=0, commute_max=0), make_hub("b", commute_max=5)]
        assert rank_hubs(hubs, FilterCriteria(commute_max=-1)) == []

    def test_empty_input(self):
        assert rank_hubs([], USER_MID_900) == []


class TestScoreInventory:
    def test_linear_below_cap(self):
        assert score_inventory(3) == Scored(12)

    def test_capped_at_40(self):
        assert score_inventory(15) == Scored(40)

    def test_cap_reached_at_ten(self):
        assert score_inventory(10) == Scored(40)

    def test_zero_listings(self):
        assert score_inventory(0) == Scored(0)


class TestScoreBudget:
    def test_exact_match(self):
        assert score_budget(rent_hub(900), USER_MID_900) == (Scored(30), True)

    def test_diff_100_is_top_tier(self):
        assert score_budget(rent_hub(1000), USER_MID_900) == (Scored(30), True)

    def test_diff_101_drops_a_tier(self):
        assert score_budget(rent_hub(1001), USER_MID_900) == (Scored(20), True)

    def test_diff_200(self):
        assert score_budget(rent_hub(700), USER_MID_900) == (Scored(20), True)

    def test_diff_300(self):
        assert score_budget(rent_hub(1200), USER_MID_900) == (Scored(10), True)

    def test_diff_301_is_a_mismatch(self):
        assert score_budget(rent_hub(1201), USER_MID_900) == (Scored(0), False)

    def test_missing_rent_max_counts_as_zero(self):
        """(1800 + 0) / 2 = 900, an exact match."""
        hub = make_hub(median_rent_min=1800, median_rent_max=None)
        assert score_budget(hub, USER_MID_900) == (Scored(30), True)

    def test_no_rent_data_is_neutral(self):
        sub_score, match = score_budget(make_hub(), USER_MID_900)
        assert sub_score == NoData()
        assert match is True

    def test_no_budget_is_neutral_regardless_of_rent(self):
        sub_score, match = score_budget(rent_hub(5000), NO_BUDGET)
        assert sub_score == NoData()
        assert match is True

    def test_half_budget_is_neutral(self):
        filters = FilterCriteria(budget_max=1000, commute_max=60)
        assert score_budget(rent_hub(1000), filters) == (NoData(), True)


class TestScoreCommute:
    def test_zero_minutes_full_points(self):
        assert score_commute(0) == Scored(20)

    def test_shorter_commute_scores_higher(self):
        near = score_commute(10).points
        far = score_commute(40).points
        assert near == pytest.approx(20 - 10 / 3)
        assert far == pytest.approx(20 - 40 / 3)
        assert near > far

    def test_floor_at_zero(self):
        assert score_commute(60) == Scored(0)
        assert score_commute(90) == Scored(0)


class TestScoreResponse:
    @pytest.mark.parametrize(
        "hours, points",
        [(0, 10), (2, 10), (2.5, 7), (6, 7), (12, 4), (24, 2), (24.1, 0), (72, 0)],
    )
    def test_tiers(self, hours, points):
        assert score_response(hours) == Scored(points)

    def test_unknown(self):
        assert score_response(None) == NoData()


class TestResolve:
    def test_scored_keeps_points(self):
        assert resolve(Scored(7), 5) == 7

    def test_scored_zero_is_not_neutral(self):
        assert resolve(Scored(0), 5) == 0

    def test_no_data_uses_neutral(self):
        assert resolve(NoData(), 5) == 5


class TestScoreHub:
    def test_no_budget_gives_15_and_match(self):
        ranked = score_hub(rent_hub(3000), NO_BUDGET)
        assert ranked.score_breakdown["budget"] == 15
        assert ranked.budget_match is True

    def test_all_null_metrics_use_defaults(self):
        ranked = score_hub(make_hub(commute_min=0), USER_MID_900)
        assert ranked.score_breakdown == {
            "inventory": 0,
            "budget": 15,
            "commute": 20,
            "response": 5,
        }
        assert ranked.score == 40

    def test_keeps_hub_fields(self):
        hub = make_hub("x", hub_name="Mesa", commute_min=15, commute_max=25)
        ranked = score_hub(hub, NO_BUDGET)
        assert ranked.hub_name == "Mesa"
        assert ranked.commute_max == 25

    def test_custom_weights(self):
        weights = RankingWeights(inventory_points_per_listing=1, inventory_max_points=5)
        ranked = score_hub(make_hub(listing_count_30d=8), NO_BUDGET, weights)
        assert ranked.score_breakdown["inventory"] == 5


class TestRankHubs:
    def test_sorted_by_score_descending(self):
        hubs = [
            # 32 + 15 + 20 + 5 = 72
            make_hub("h72", listing_count_30d=8),
            # 8 + 15 + 20 + 2 = 45
            make_hub("h45", listing_count_30d=2, median_response_hours=20),
            # 40 + 30 + 20 + 0 = 90
            make_hub(
                "h90",
                listing_count_30d=10,
                median_rent_min=900,
                median_rent_max=900,
                median_response_hours=48,
            ),
        ]
        ranked = rank_hubs(hubs, USER_MID_900)
        assert [h.hub_id for h in ranked] == ["h90", "h72", "h45"]
        assert [h.score for h in ranked] == pytest.approx([90, 72, 45])

    def test_ties_broken_by_name(self):
        hubs = [
            make_hub("2", hub_name="Mesa"),
            make_hub("1", hub_name="Gilbert"),
            make_hub("3", hub_name="chandler"),
        ]
        ranked = rank_hubs(hubs, NO_BUDGET)
        assert [h.hub_name for h in ranked] == ["chandler", "Gilbert", "Mesa"]

    def test_ties_with_same_name_broken_by_id(self):
        hubs = [make_hub("b", hub_name="Mesa"), make_hub("a", hub_name="Mesa")]
        assert [h.hub_id for h in rank_hubs(hubs, NO_BUDGET)] == ["a", "b"]

    def test_end_to_end_example(self):
        hub1 = make_hub(
            "hub1",
            commute_min=5,
            commute_max=15,
            listing_count_30d=8,
            median_rent_min=700,
            median_rent_max=900,
            median_response_hours=3,
        )
        hub2 = make_hub("hub2", commute_min=25, commute_max=40, listing_count_30d=1)
        filters = FilterCriteria(budget_min=600, budget_max=1000, commute_max=45)

        ranked = rank_hubs([hub2, hub1], filters)

        assert [h.hub_id for h in ranked] == ["hub1", "hub2"]
        assert ranked[0].score == pytest.approx(32 + 30 + (20 - 5 / 3) + 7)
        assert ranked[0].score == pytest.approx(87.33, abs=0.01)
        assert ranked[1].score == pytest.approx(4 + 15 + (20 - 25 / 3) + 5)
        assert ranked[1].score == pytest.approx(35.67, abs=0.01)
        assert all(h.budget_match for h in ranked)

    def test_reranking_ranked_hubs(self):
        first = rank_hubs([make_hub(listing_count_30d=3)], NO_BUDGET)
        again = rank_hubs(first, NO_BUDGET)
        assert again[0].score == first[0].score

    def test_does_not_truncate(self):
        hubs = [make_hub(str(i)) for i in range(12)]
        assert len(rank_hubs(hubs, NO_BUDGET)) == 12
