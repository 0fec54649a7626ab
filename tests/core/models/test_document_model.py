import pytest
from lxml import etree as ET

from table_toolkit.core.exceptions import ModelError
from table_toolkit.core.models import AttributeOperation, Batch, DocumentModel


@pytest.fixture
def table(model):
    return model.document.root.xpath("//*[@id='t1']")[0]


@pytest.fixture
def change_log(model):
    """Collect batches reported by document change events."""
    seen = []
    model.document.on_change(seen.append)
    return seen


def test_set_and_remove_attribute_inside_change_block(model, table):
    model.change(lambda writer: writer.set_attribute("width", "100px", table))
    assert table.get("width") == "100px"

    model.change(lambda writer: writer.remove_attribute("width", table))
    assert table.get("width") is None


def test_non_string_values_are_stringified(model, table):
    model.change(lambda writer: writer.set_attribute("cols", 3, table))
    assert table.get("cols") == "3"


def test_noop_changes_record_no_operation(model, table, change_log):
    batch = Batch()
    model.enqueue_change(batch, lambda writer: writer.set_attribute("borderStyle", "solid", table))
    model.enqueue_change(batch, lambda writer: writer.remove_attribute("missing", table))
    assert batch.operations == []
    assert change_log == []
    assert model.document.version == 0


def test_operations_are_recorded_in_the_batch(model, table, change_log):
    batch = model.create_batch()
    model.enqueue_change(batch, lambda writer: writer.set_attribute("width", "10px", table))
    assert batch.operations == [AttributeOperation(table, "width", "50px", "10px")]
    assert change_log == [batch]
    assert model.document.version == 1


def test_none_batch_creates_a_new_default_batch(model, table, change_log):
    model.enqueue_change(None, lambda writer: writer.set_attribute("width", "1px", table))
    model.enqueue_change(None, lambda writer: writer.set_attribute("width", "2px", table))
    assert len(change_log) == 2
    assert change_log[0] is not change_log[1]
    assert all(batch.type == "default" for batch in change_log)


def test_writer_rejects_missing_target(model):
    with pytest.raises(ModelError):
        model.change(lambda writer: writer.set_attribute("width", "1px", None))
    with pytest.raises(ModelError):
        model.change(lambda writer: writer.remove_attribute("width", None))


def test_writer_rejects_detached_element(model):
    detached = ET.Element("table")
    with pytest.raises(ModelError):
        model.change(lambda writer: writer.set_attribute("width", "1px", detached))
    assert detached.get("width") is None


def test_writer_cannot_be_used_after_its_block(model, table):
    leaked = model.change(lambda writer: writer)
    with pytest.raises(ModelError):
        leaked.set_attribute("width", "1px", table)


def test_failing_block_is_rolled_back(model, table, change_log):
    def half_written(writer):
        writer.set_attribute("width", "999px", table)
        writer.set_attribute("height", "10px", table)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        model.change(half_written)

    assert table.get("width") == "50px"
    assert table.get("height") is None
    assert change_log == []


def test_rollback_keeps_earlier_operations_of_a_shared_batch(model, table):
    batch = Batch()
    model.enqueue_change(batch, lambda writer: writer.set_attribute("height", "5px", table))

    def failing(writer):
        writer.set_attribute("width", "1px", table)
        writer.remove_attribute("nope", None)

    with pytest.raises(ModelError):
        model.enqueue_change(batch, failing)

    assert [op.key for op in batch.operations] == ["height"]
    assert table.get("width") == "50px"
    assert table.get("height") == "5px"


def test_model_recovers_after_a_failing_block(model, table):
    with pytest.raises(ModelError):
        model.change(lambda writer: writer.set_attribute("width", "1px", None))
    model.change(lambda writer: writer.set_attribute("width", "2px", table))
    assert table.get("width") == "2px"


def test_enqueued_change_runs_after_current_block(model, table):
    order = []

    def inner(writer):
        order.append("inner")
        writer.set_attribute("height", "1px", table)

    def outer(writer):
        model.enqueue_change(None, inner)
        order.append("outer")
        writer.set_attribute("width", "1px", table)

    model.change(outer)
    assert order == ["outer", "inner"]
    assert table.get("height") == "1px"


def test_nested_change_joins_current_batch(model, table, change_log):
    def outer(writer):
        writer.set_attribute("width", "1px", table)
        model.change(lambda w: w.set_attribute("height", "1px", table))

    model.change(outer)
    assert len(change_log) == 1
    assert [op.key for op in change_log[0].operations] == ["width", "height"]


def test_change_from_change_listener_runs_as_next_block(model, table, change_log):
    def follow_up(batch):
        if len(change_log) == 1:
            model.change(lambda writer: writer.set_attribute("height", "1px", table))

    model.document.on_change(follow_up)
    model.enqueue_change(None, lambda writer: writer.set_attribute("width", "9px", table))

    assert table.get("width") == "9px"
    assert table.get("height") == "1px"
    assert len(change_log) == 2
    assert change_log[0] is not change_log[1]


def test_change_returns_callback_result(model):
    assert model.change(lambda writer: 42) == 42


def test_unknown_batch_type_is_rejected(model):
    with pytest.raises(ModelError):
        model.create_batch("bogus")


def test_attribute_operation_reversed_restores_value(table):
    operation = AttributeOperation(table, "width", "50px", None)
    operation.apply()
    assert table.get("width") is None
    operation.reversed().apply()
    assert table.get("width") == "50px"


def test_off_change_stops_notifications(model, table):
    seen = []
    model.document.on_change(seen.append)
    model.document.off_change(seen.append)
    model.change(lambda writer: writer.set_attribute("width", "3px", table))
    assert seen == []


def test_document_contains(model, table):
    assert model.document.contains(table)
    assert model.document.contains(model.document.root)
    assert not model.document.contains(ET.Element("table"))


def test_model_accepts_standalone_root():
    root = ET.fromstring("<root><table/></root>")
    model = DocumentModel(root)
    model.change(lambda writer: writer.set_attribute("width", "1px", root[0]))
    assert root[0].get("width") == "1px"
