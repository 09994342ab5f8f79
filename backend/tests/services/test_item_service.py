"""Tests for ItemService: add, select, unselect, reorder and paging."""

import pytest

from idspace.services.items import BASE_MAX_ID, ItemService, PageRequest
from idspace.services.items.exceptions import (
    EmptyIdList,
    IdsAlreadyExist,
    IdsNotFound,
    IdsNotSelected,
    InvalidIds,
    ReorderIdsNotSelected,
    ReorderWindowMismatch,
)


class TestAddIds:
    def test_adds_new_ids(self, service: ItemService) -> None:
        assert service.add_ids([1_000_005, 1_000_001]) == [1_000_005, 1_000_001]
        assert service.store.exists(1_000_001)
        assert service.store.exists(1_000_005)
        assert not service.store.exists(1_000_002)

    def test_store_stays_sorted(self, service: ItemService) -> None:
        service.add_ids([1_000_009, 1_000_002])
        service.add_ids([1_000_005])
        service.add_ids([1_000_001, 1_000_007])

        assert service.store.extra_ids.ids == [1_000_001, 1_000_002, 1_000_005, 1_000_007, 1_000_009]

    def test_coerces_numeric_values(self, service: ItemService) -> None:
        assert service.add_ids(["1000002", 1_000_003.0, " 1000004 "]) == [1_000_002, 1_000_003, 1_000_004]

    def test_drops_non_finite_values(self, service: ItemService) -> None:
        assert service.add_ids([1_000_001, "abc", float("inf")]) == [1_000_001]

    def test_empty_list_is_rejected(self, service: ItemService) -> None:
        with pytest.raises(EmptyIdList):
            service.add_ids([])

    @pytest.mark.parametrize("value", [0, -5, "-1", 1.5, "2.5"])
    def test_non_positive_integers_are_rejected(self, service: ItemService, value: object) -> None:
        with pytest.raises(InvalidIds):
            service.add_ids([1_000_001, value])

        assert not service.store.exists(1_000_001)

    def test_base_ids_already_exist(self, service: ItemService) -> None:
        with pytest.raises(IdsAlreadyExist) as exc_info:
            service.add_ids([5, BASE_MAX_ID])

        assert exc_info.value.duplicates == [5, BASE_MAX_ID]

    def test_conflict_adds_nothing(self, service: ItemService) -> None:
        service.add_ids([1_000_001])

        with pytest.raises(IdsAlreadyExist) as exc_info:
            service.add_ids([1_000_002, 1_000_001])

        assert exc_info.value.duplicates == [1_000_001]
        assert exc_info.value.details == {"duplicates": [1_000_001]}
        assert not service.store.exists(1_000_002)


class TestSelectIds:
    def test_appends_in_request_order(self, service: ItemService) -> None:
        assert service.select_ids([7, 3, 9]) == ([7, 3, 9], [7, 3, 9])

    def test_is_idempotent(self, service: ItemService) -> None:
        service.select_ids([5, 5, 6])

        assert service.select_ids([6, 7]) == ([5, 6, 7], [7])
        assert service.select_ids([5]) == ([5, 6, 7], [])

    def test_extra_ids_need_adding_first(self, service: ItemService) -> None:
        with pytest.raises(IdsNotFound) as exc_info:
            service.select_ids([5, 1_000_009])

        assert exc_info.value.nonexistent == [1_000_009]
        assert service.store.selection.order == []

        service.add_ids([1_000_009])

        assert service.select_ids([5, 1_000_009]) == ([5, 1_000_009], [5, 1_000_009])

    def test_invalid_values_are_reported_as_sent(self, service: ItemService) -> None:
        with pytest.raises(IdsNotFound) as exc_info:
            service.select_ids(["abc", 0, "12"])

        assert exc_info.value.nonexistent == ["abc", 0]

    def test_non_finite_values_are_reported_as_strings(self, service: ItemService) -> None:
        with pytest.raises(IdsNotFound) as exc_info:
            service.select_ids([float("inf"), float("nan"), 2])

        assert exc_info.value.nonexistent == ["inf", "nan"]

    def test_empty_list_is_rejected(self, service: ItemService) -> None:
        with pytest.raises(EmptyIdList):
            service.select_ids([])


class TestUnselectIds:
    def test_removes_keeping_order(self, service: ItemService) -> None:
        service.select_ids([1, 2, 3, 4])

        assert service.unselect_ids([2, 4]) == [1, 3]

    def test_reselect_goes_to_the_end(self, service: ItemService) -> None:
        service.select_ids([1, 2, 3])
        service.unselect_ids([1])

        selected, added = service.select_ids([1])

        assert selected == [2, 3, 1]
        assert added == [1]

    def test_all_ids_must_be_selected(self, service: ItemService) -> None:
        service.select_ids([1, 3])

        with pytest.raises(IdsNotSelected) as exc_info:
            service.unselect_ids([1, 9])

        assert exc_info.value.not_selected == [9]
        assert exc_info.value.details == {"notSelected": [9]}
        assert service.store.selection.order == [1, 3]

    def test_empty_list_is_rejected(self, service: ItemService) -> None:
        with pytest.raises(EmptyIdList):
            service.unselect_ids([])


class TestReorder:
    def test_add_select_then_swap(self, service: ItemService) -> None:
        assert service.add_ids([1_000_001, 1_000_005]) == [1_000_001, 1_000_005]
        assert service.select_ids([1_000_001])[0] == [1_000_001]
        assert service.select_ids([1_000_005])[0] == [1_000_001, 1_000_005]

        assert service.reorder([1_000_005, 1_000_001], offset=0, search="") == [1_000_005, 1_000_001]

    def test_loose_parameters(self, service: ItemService) -> None:
        service.select_ids([1, 2, 3, 4])

        assert service.reorder(["3", "2"], offset="1", search=None) == [1, 3, 2, 4]
        assert service.reorder([3, 1], offset=-4) == [3, 1, 2, 4]

    def test_search_is_trimmed(self, service: ItemService) -> None:
        service.select_ids([11, 2, 12, 3, 13])

        assert service.reorder([12, 11], offset=0, search=" 1 ") == [12, 2, 11, 3, 13]

    def test_non_finite_values_are_dropped(self, service: ItemService) -> None:
        service.select_ids([1, 2])

        assert service.reorder(["abc", 2, 1]) == [2, 1]

    def test_fractional_ids_are_not_selected(self, service: ItemService) -> None:
        service.select_ids([1, 2])

        with pytest.raises(ReorderIdsNotSelected):
            service.reorder([1.5, 2])

    def test_stale_window_is_rejected(self, service: ItemService) -> None:
        service.select_ids([1, 2, 3, 4])
        service.unselect_ids([1])

        # Client still sees [1, 2, 3, 4] and swaps its window [2, 3] at offset 1
        with pytest.raises(ReorderWindowMismatch):
            service.reorder([3, 2], offset=1)

        assert service.store.selection.order == [2, 3, 4]


class TestPaging:
    def test_unselected_skips_selected(self, service: ItemService) -> None:
        service.select_ids([1, 3])

        page = service.list_unselected(PageRequest(limit=3))

        assert page.items == [2, 4, 5]
        assert page.has_more is True

    def test_unselected_search_on_fresh_state(self, service: ItemService) -> None:
        page = service.list_unselected(PageRequest.from_params("20", "0", "42"))

        assert page.items[:4] == [42, 142, 242, 342]
        assert len(page.items) == 20
        assert page.has_more is True

    def test_unselected_includes_extra_ids_after_base_range(self, small_service: ItemService) -> None:
        small_service.add_ids([70, 60])
        small_service.select_ids([2, 60])

        page = small_service.list_unselected(PageRequest(limit=20, offset=40))

        assert page.items == [*range(42, 51), 70]
        assert page.has_more is False

    def test_selected_in_selection_order(self, service: ItemService) -> None:
        service.select_ids([30, 10, 20, 13])

        assert service.list_selected(PageRequest(limit=2)).items == [30, 10]
        assert service.list_selected(PageRequest(search="1")).items == [10, 13]

    @pytest.mark.parametrize("search", ["", "1", "7", "99"])
    def test_pages_concatenate_to_the_filtered_sequence(self, small_service: ItemService, search: str) -> None:
        small_service.add_ids([71, 57, 99])
        small_service.select_ids([3, 17, 57, 40])

        for list_page, expected in [
            (
                small_service.list_unselected,
                [id_ for id_ in [*range(1, 51), 57, 71, 99] if id_ not in {3, 17, 57, 40} and search in str(id_)],
            ),
            (
                small_service.list_selected,
                [id_ for id_ in [3, 17, 57, 40] if search in str(id_)],
            ),
        ]:
            collected: list[int] = []
            offset = 0
            while True:
                page = list_page(PageRequest(limit=3, offset=offset, search=search))
                collected.extend(page.items)
                offset += len(page.items)
                if not page.has_more:
                    break
                assert page.items

            assert collected == expected
