from google.protobuf import descriptor_pb2 as d2

from protoc_gen_yaml.parser.descriptor_flattener import flatten_messages


def _nested_chain(depth: int) -> d2.FileDescriptorProto:
    """Build a file with one top-level message nested `depth` levels deep: L0 { L1 { L2 ... } }."""
    file = d2.FileDescriptorProto(name="chain.proto", package="pkg")
    node = file.message_type.add(name="L0")
    node.field.add(name="level_0", number=1)
    for i in range(1, depth + 1):
        node = node.nested_type.add(name=f"L{i}")
        node.field.add(name=f"level_{i}", number=i + 1)
    return file


class TestSimpleFlatten:
    def test_no_nesting(self):
        file = d2.FileDescriptorProto(name="a.proto", package="pkg")
        file.message_type.add(name="Foo").field.add(name="id", number=1)
        file.message_type.add(name="Bar")

        flat = flatten_messages(file)
        assert [m.name for m in flat] == ["Foo", "Bar"]
        assert [f.name for f in flat[0].field] == ["id"]

    def test_single_nested_message(self):
        file = d2.FileDescriptorProto(name="a.proto", package="pkg")
        outer = file.message_type.add(name="Outer")
        outer.nested_type.add(name="Inner").field.add(name="id", number=1)

        flat = flatten_messages(file)
        # Children come before the message that contained them
        assert [m.name for m in flat] == ["Outer.Inner", "Outer"]
        assert flat[0].field[0].name == "id"
        assert flat[0].field[0].number == 1

    def test_empty_file(self):
        assert flatten_messages(d2.FileDescriptorProto(name="empty.proto")) == []


class TestDeepNesting:
    def test_count_and_names_for_any_depth(self):
        for depth in range(0, 6):
            flat = flatten_messages(_nested_chain(depth))
            assert len(flat) == depth + 1

            expected = {".".join(f"L{j}" for j in range(i + 1)) for i in range(depth + 1)}
            assert {m.name for m in flat} == expected

    def test_deepest_first_order(self):
        flat = flatten_messages(_nested_chain(2))
        assert [m.name for m in flat] == ["L0.L1.L2", "L0.L1", "L0"]

    def test_sibling_subtrees(self):
        file = d2.FileDescriptorProto(name="a.proto")
        root = file.message_type.add(name="Root")
        a = root.nested_type.add(name="A")
        a.nested_type.add(name="Leaf")
        b = root.nested_type.add(name="B")
        b.nested_type.add(name="Leaf")

        names = [m.name for m in flatten_messages(file)]
        assert names == ["Root.A.Leaf", "Root.A", "Root.B.Leaf", "Root.B", "Root"]

    def test_no_nested_types_remain(self):
        for msg in flatten_messages(_nested_chain(4)):
            assert len(msg.nested_type) == 0

    def test_fields_are_kept_per_level(self):
        flat = {m.name: m for m in flatten_messages(_nested_chain(2))}
        assert [(f.name, f.number) for f in flat["L0"].field] == [("level_0", 1)]
        assert [(f.name, f.number) for f in flat["L0.L1"].field] == [("level_1", 2)]
        assert [(f.name, f.number) for f in flat["L0.L1.L2"].field] == [("level_2", 3)]


class TestInputIsUntouched:
    def test_source_descriptors_unchanged(self):
        file = _nested_chain(3)
        before = file.SerializeToString(deterministic=True)

        flatten_messages(file)

        assert file.SerializeToString(deterministic=True) == before
        assert file.message_type[0].nested_type[0].name == "L1"

    def test_flattening_twice_gives_same_result(self):
        file = _nested_chain(3)
        first = [m.SerializeToString(deterministic=True) for m in flatten_messages(file)]
        second = [m.SerializeToString(deterministic=True) for m in flatten_messages(file)]
        assert first == second

    def test_map_entry_types_are_kept(self):
        file = d2.FileDescriptorProto(name="a.proto")
        msg = file.message_type.add(name="Holder")
        entry = msg.nested_type.add(name="LabelsEntry")
        entry.options.map_entry = True
        entry.field.add(name="key", number=1)
        entry.field.add(name="value", number=2)

        names = [m.name for m in flatten_messages(file)]
        assert names == ["Holder.LabelsEntry", "Holder"]
