from __future__ import annotations

from interactables.core.registry import InteractableRegistry
from interactables.core.status import UPDATED_SUCCESSFULLY


def _props() -> dict:
    return {
        "text": "Hello",
        "color": "blue",
        "size": "large",
        "disabled": False,
        "count": 0,
    }


def _register(reg: InteractableRegistry, props: dict | None = None, description: str = "A test component") -> str:
    return reg.add(
        name="TestComponent",
        description=description,
        component="TestComponent",
        props=props if props is not None else _props(),
    )


def test_partial_update_changes_only_given_keys() -> None:
    reg = InteractableRegistry()
    cid = _register(reg)

    assert reg.update_props(cid, {"text": "Updated Text", "color": "red"}) == UPDATED_SUCCESSFULLY

    e = reg.get(cid)
    assert e is not None
    assert e.props == {"text": "Updated Text", "color": "red", "size": "large", "disabled": False, "count": 0}


def test_single_key_update() -> None:
    reg = InteractableRegistry()
    cid = _register(reg)

    assert reg.update_props(cid, {"count": 42}) == "Updated successfully"
    assert reg.get(cid).props == {"text": "Hello", "color": "blue", "size": "large", "disabled": False, "count": 42}  # type: ignore[union-attr]


def test_sequential_updates_equal_right_biased_union() -> None:
    reg = InteractableRegistry()
    a = _register(reg)
    b = _register(reg)

    m1 = {"text": "First Update", "count": 1}
    m2 = {"color": "green", "disabled": True, "count": 100}
    reg.update_props(a, m1)
    reg.update_props(a, m2)
    reg.update_props(b, {**m1, **m2})

    assert reg.get(a).props == reg.get(b).props  # type: ignore[union-attr]
    assert reg.get(a).props["count"] == 100  # type: ignore[union-attr]


def test_complete_update_replaces_every_key() -> None:
    reg = InteractableRegistry()
    cid = _register(reg)
    full = {"text": "Complete Update", "color": "purple", "size": "medium", "disabled": True, "count": 999}

    assert reg.update_props(cid, full) == UPDATED_SUCCESSFULLY
    assert reg.get(cid).props == full  # type: ignore[union-attr]


def test_empty_update_warns_and_leaves_props() -> None:
    reg = InteractableRegistry()
    cid = _register(reg)
    before = reg.get(cid)

    status = reg.update_props(cid, {})

    assert status == f"Warning: No props provided for component with ID {cid}"
    after = reg.get(cid)
    assert after is not None and before is not None
    assert after.props == _props()
    assert after.revision == before.revision


def test_same_values_still_succeed() -> None:
    reg = InteractableRegistry()
    cid = _register(reg)

    assert reg.update_props(cid, {"text": "Hello", "color": "blue"}) == UPDATED_SUCCESSFULLY
    assert reg.get(cid).props == _props()  # type: ignore[union-attr]
    assert reg.get(cid).revision == 2  # type: ignore[union-attr]


def test_unknown_id_reports_error_without_side_effects() -> None:
    reg = InteractableRegistry()
    cid = _register(reg)
    revision = reg.global_revision()

    status = reg.update_props("non-existent-id", {"text": "New Text"})

    assert status == "Error: Component with ID non-existent-id not found"
    assert "non-existent-id" not in reg
    assert len(reg) == 1
    assert reg.global_revision() == revision
    assert reg.get(cid).props == _props()  # type: ignore[union-attr]


def test_new_keys_are_added_even_with_schema() -> None:
    reg = InteractableRegistry()
    cid = reg.add(
        name="TestComponent",
        component="TestComponent",
        props=_props(),
        props_schema={"type": "object", "properties": {"text": {"type": "string"}}},
    )

    assert reg.update_props(cid, {"text": "Updated", "newProperty": "This is new"}) == UPDATED_SUCCESSFULLY
    assert reg.get(cid).props == {**_props(), "text": "Updated", "newProperty": "This is new"}  # type: ignore[union-attr]


def test_updates_are_isolated_between_entries() -> None:
    reg = InteractableRegistry()
    c1 = _register(reg, description="First component")
    c2 = _register(
        reg,
        {"text": "Component 2", "color": "red", "size": "small", "disabled": True, "count": 10},
        description="Second component",
    )

    reg.update_props(c1, {"text": "Updated Component 1", "count": 5})
    reg.update_props(c2, {"color": "green", "disabled": False})

    assert reg.get(c1).props == {  # type: ignore[union-attr]
        "text": "Updated Component 1",
        "color": "blue",
        "size": "large",
        "disabled": False,
        "count": 5,
    }
    assert reg.get(c2).props == {  # type: ignore[union-attr]
        "text": "Component 2",
        "color": "green",
        "size": "small",
        "disabled": False,
        "count": 10,
    }


def test_nested_mapping_is_replaced_wholesale() -> None:
    reg = InteractableRegistry()
    cid = reg.add(
        name="ComplexComponent",
        description="A component with complex props",
        props={
            "text": "Hello",
            "config": {"theme": "dark", "settings": {"autoSave": True, "notifications": False}},
            "items": ["item1", "item2"],
            "metadata": {"version": "1.0", "author": "test"},
        },
    )

    assert reg.update_props(cid, {"config": {"theme": "light"}}) == UPDATED_SUCCESSFULLY

    props = reg.get(cid).props  # type: ignore[union-attr]
    assert props["config"] == {"theme": "light"}
    assert props["items"] == ["item1", "item2"]
    assert props["metadata"] == {"version": "1.0", "author": "test"}


def test_scenario_from_hello_to_hi() -> None:
    reg = InteractableRegistry()
    c1 = reg.add(name="c1", props={"text": "Hello", "count": 0})

    assert reg.update_props(c1, {"text": "Hi"}) == "Updated successfully"
    assert reg.get(c1).props == {"text": "Hi", "count": 0}  # type: ignore[union-attr]
    assert f"No props provided for component with ID {c1}" in reg.update_props(c1, {})
    assert "Component with ID missing not found" in reg.update_props("missing", {})


def test_status_helpers_classify_outcomes() -> None:
    from interactables.core.status import is_error, is_success, is_warning, no_props_status, not_found_status

    assert is_success(UPDATED_SUCCESSFULLY)
    assert is_warning(no_props_status("c1")) and not is_error(no_props_status("c1"))
    assert is_error(not_found_status("c1")) and not is_warning(not_found_status("c1"))
    assert not is_success(not_found_status("c1"))
