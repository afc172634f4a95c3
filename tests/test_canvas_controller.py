"""Tests for palette drops, reordering and selection on the canvas."""

import pytest

from page_builder.models.canvas_models import (
    DEFAULT_STYLE, CanvasElement, CanvasState, DragTransaction, ElementType
)


def _types(controller):
    return [el.type for el in controller.elements]


def test_palette_kinds(palette):
    assert palette.kinds() == [
        ElementType.TEXT, ElementType.IMAGE, ElementType.DIV, ElementType.LIST
    ]


def test_palette_drag_start_carries_kind(palette):
    transaction = palette.drag_start(ElementType.IMAGE)
    assert transaction.get_data("type") == "Image"


def test_drop_appends_in_order_with_unique_ids(controller, palette):
    kinds = [ElementType.DIV, ElementType.TEXT, ElementType.DIV, ElementType.LIST, ElementType.IMAGE]
    for kind in kinds:
        controller.drop(palette.drag_start(kind))

    assert _types(controller) == kinds
    ids = [el.id for el in controller.elements]
    assert len(set(ids)) == len(ids)


def test_drop_sets_default_content_and_style(controller, palette):
    element = controller.drop(palette.drag_start(ElementType.TEXT))

    assert element.content == "Text Content"
    assert element.style == {"fontSize": "16px", "color": "#000000", "padding": "8px"}
    assert element.children is None


def test_default_style_not_shared_between_elements(controller, palette):
    first = controller.drop(palette.drag_start(ElementType.TEXT))
    second = controller.drop(palette.drag_start(ElementType.TEXT))

    first.style["color"] = "#ff0000"
    assert second.style["color"] == "#000000"
    assert DEFAULT_STYLE["color"] == "#000000"


def test_drop_leaves_selection_alone(four_elements, palette):
    four_elements.select(1)
    selected = four_elements.selected_element

    four_elements.drop(palette.drag_start(ElementType.TEXT))

    assert four_elements.selected_index == 1
    assert four_elements.selected_element is selected


def test_drop_without_type_is_ignored(controller):
    assert controller.drop(DragTransaction()) is None
    assert controller.elements == []


def test_reorder_extract_then_insert(four_elements):
    before = list(four_elements.elements)
    a, b, c, d = before

    four_elements.element_drag_start(0)
    assert four_elements.element_drop(2) is True

    assert four_elements.elements == [b, c, a, d]
    assert four_elements.dragging_index is None


def test_reorder_moves_backwards(four_elements):
    a, b, c, d = list(four_elements.elements)

    four_elements.element_drag_start(3)
    four_elements.element_drop(1)

    assert four_elements.elements == [a, d, b, c]


def test_reorder_onto_self_is_noop(four_elements):
    before = list(four_elements.elements)

    four_elements.element_drag_start(2)
    assert four_elements.dragging_index == 2
    assert four_elements.element_drop(2) is False

    assert four_elements.elements == before
    assert four_elements.dragging_index is None


def test_reorder_without_drag_start_is_noop(four_elements):
    before = list(four_elements.elements)

    assert four_elements.element_drop(1) is False

    assert four_elements.elements == before
    assert four_elements.dragging_index is None


def test_drop_past_end_appends(four_elements):
    a, b, c, d = list(four_elements.elements)

    four_elements.element_drag_start(0)
    four_elements.element_drop(10)

    assert four_elements.elements == [b, c, d, a]


def test_drag_start_out_of_range(four_elements):
    assert four_elements.element_drag_start(4) is False
    assert four_elements.dragging_index is None


def test_drag_end_clears_stale_drag(four_elements):
    before = list(four_elements.elements)
    four_elements.element_drag_start(0)

    four_elements.drag_end()

    assert four_elements.dragging_index is None
    assert four_elements.element_drop(3) is False
    assert four_elements.elements == before


def test_palette_drop_clears_stale_drag(four_elements, palette):
    four_elements.element_drag_start(0)

    four_elements.drop(palette.drag_start(ElementType.DIV))

    assert four_elements.dragging_index is None
    assert len(four_elements.elements) == 5


def test_drag_over_is_idempotent(four_elements, palette):
    before = [el.model_copy(deep=True) for el in four_elements.elements]

    for _ in range(5):
        assert four_elements.drag_over() is True

    assert four_elements.elements == before
    four_elements.drop(palette.drag_start(ElementType.LIST))
    assert len(four_elements.elements) == 5


def test_handle_drop_dispatch(four_elements, palette):
    a, b, c, d = list(four_elements.elements)

    # Palette payload wins over the slot it landed on
    assert four_elements.handle_drop(palette.drag_start(ElementType.TEXT), target_index=0)
    assert len(four_elements.elements) == 5
    assert four_elements.elements[0] is a

    four_elements.element_drag_start(1)
    assert four_elements.handle_drop(DragTransaction(), target_index=0)
    assert four_elements.elements[:2] == [b, a]

    four_elements.element_drag_start(1)
    assert four_elements.handle_drop() is False
    assert four_elements.dragging_index is None


def test_select_replaces_prior_selection(four_elements):
    assert four_elements.selected_index is None

    four_elements.select(0)
    four_elements.select(2)

    assert four_elements.selected_index == 2
    assert four_elements.selected_element.type == ElementType.DIV


def test_select_out_of_range(four_elements):
    four_elements.select(1)

    assert four_elements.select(7) is False
    assert four_elements.selected_index == 1


def test_selection_follows_element_through_reorder(four_elements):
    four_elements.select(0)
    selected = four_elements.selected_element

    four_elements.element_drag_start(0)
    four_elements.element_drop(2)

    assert four_elements.selected_index == 2
    assert four_elements.selected_element is selected


def test_view_marks_selected_element(four_elements):
    four_elements.select(3)

    view = four_elements.view()

    assert [ev.index for ev in view.elements] == [0, 1, 2, 3]
    assert [ev.selected for ev in view.elements] == [False, False, False, True]
    assert view.selected_index == 3
    assert view.empty_message is None


def test_view_of_empty_canvas(controller):
    view = controller.view()
    assert view.elements == []
    assert view.empty_message == "Drag elements here..."


def test_canvas_state_rejects_duplicate_ids():
    canvas = CanvasState()
    element = CanvasElement.create(ElementType.TEXT)
    canvas.add_element(element)

    with pytest.raises(ValueError):
        canvas.add_element(CanvasElement(id=element.id, type=ElementType.DIV, content="x"))
    assert len(canvas) == 1


def test_rejected_drop_keeps_drag_in_progress(four_elements):
    before = list(four_elements.elements)
    four_elements.element_drag_start(0)

    with pytest.raises(ValueError):
        four_elements.drop(DragTransaction(data={"type": "Button"}))

    assert four_elements.dragging_index == 0
    assert four_elements.elements == before
