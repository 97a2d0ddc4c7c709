import io

import pytest

from mgtype.errors import IndexOutOfRange, UnknownTypeName
from mgtype.typers import UNMAPPED, AtomIndexTypeMapper, FileAtomMapper, GninaIndexTyper, SubsetAtomMapper


def test_file_mapper_basic():
    mapper = FileAtomMapper.from_string("A B\nC\n", ["A", "B", "C"])
    assert mapper.num_types() == 2
    assert mapper.get_type_names() == ["A_B", "C"]
    assert mapper.get_type(0) == 0
    assert mapper.get_type(1) == 0
    assert mapper.get_type(2) == 1


def test_file_mapper_blank_lines_do_not_shift_ids():
    mapper = FileAtomMapper.from_string("\nA\n   \n\tC  B\n\n", ["A", "B", "C"])
    assert mapper.get_type_names() == ["A", "C_B"]
    assert [mapper.get_type(i) for i in range(3)] == [0, 1, 1]


def test_file_mapper_unlisted_types_are_unmapped():
    mapper = FileAtomMapper.from_string("C\n", ["A", "B", "C"])
    assert mapper.num_types() == 1
    assert mapper.get_type(0) == UNMAPPED
    assert mapper.get_type(1) == UNMAPPED
    assert mapper.get_type(2) == 0


def test_file_mapper_unknown_name():
    with pytest.raises(UnknownTypeName) as info:
        FileAtomMapper.from_string("A\nD\n", ["A", "B", "C"])
    assert info.value.name == "D"


def test_file_mapper_has_no_comment_syntax():
    with pytest.raises(UnknownTypeName):
        FileAtomMapper.from_string("A # carbon\n", ["A", "B", "C"])


def test_file_mapper_out_of_range():
    mapper = FileAtomMapper.from_string("A\n", ["A", "B"])
    with pytest.raises(IndexOutOfRange):
        mapper.get_type(2)
    with pytest.raises(IndexOutOfRange):
        mapper.get_type(-1)


def test_file_mapper_from_path_and_stream(tmp_path):
    names = GninaIndexTyper().get_type_names()
    text = "Bromine Iodine Chlorine Fluorine\nZinc\n"
    path = tmp_path / "halogens.map"
    path.write_text(text)

    from_path = FileAtomMapper(path, names)
    from_str_path = FileAtomMapper(str(path), names)
    from_stream = FileAtomMapper(io.StringIO(text), names)
    for mapper in (from_path, from_str_path, from_stream):
        assert mapper.get_type_names() == ["Bromine_Iodine_Chlorine_Fluorine", "Zinc"]
        assert mapper.get_type(names.index("Iodine")) == 0
        assert mapper.get_type(names.index("Zinc")) == 1
        assert mapper.get_type(names.index("Hydrogen")) == UNMAPPED


def test_subset_identity_law():
    n = 28
    mapper = SubsetAtomMapper(list(range(n)), include_catchall=False, num_original_types=n)
    assert mapper.num_types() == n
    assert all(mapper.get_type(i) == i for i in range(n))


def test_subset_catchall():
    mapper = SubsetAtomMapper([2, 5], include_catchall=True, num_original_types=10)
    assert mapper.num_types() == 3
    assert mapper.get_type(2) == 0
    assert mapper.get_type(5) == 1
    for i in set(range(10)) - {2, 5}:
        assert mapper.get_type(i) == 2
    assert mapper.get_type_names() == ["2", "5", "Other"]


def test_subset_without_catchall():
    mapper = SubsetAtomMapper([2, 5], include_catchall=False)
    assert mapper.num_types() == 2
    assert mapper.get_type(5) == 1
    assert mapper.get_type(0) == UNMAPPED
    assert mapper.get_type(1000) == UNMAPPED


def test_subset_groups():
    names = ["A", "B", "C", "D", "E"]
    mapper = SubsetAtomMapper([[0, 1], [3]], include_catchall=False, type_names=names)
    assert mapper.num_types() == 2
    assert mapper.get_type_names() == ["A_B", "D"]
    assert [mapper.get_type(i) for i in range(5)] == [0, 0, UNMAPPED, 1, UNMAPPED]


def test_subset_groups_last_write_wins():
    mapper = SubsetAtomMapper([[0, 1], [1, 2]], include_catchall=True)
    assert mapper.num_types() == 3
    assert mapper.get_type(0) == 0
    assert mapper.get_type(1) == 1
    assert mapper.get_type(2) == 1
    assert mapper.get_type(3) == 2


def test_subset_range_checks():
    with pytest.raises(IndexOutOfRange):
        SubsetAtomMapper([1, 10], num_original_types=10)
    with pytest.raises(IndexOutOfRange):
        SubsetAtomMapper([-1])
    mapper = SubsetAtomMapper([1], type_names=["A", "B"])
    with pytest.raises(IndexOutOfRange):
        mapper.get_type(2)
    with pytest.raises(IndexOutOfRange):
        mapper.get_type(-3)


def test_subset_names_disagree_with_domain():
    with pytest.raises(ValueError):
        SubsetAtomMapper([0], type_names=["A", "B"], num_original_types=3)


def test_identity_mapper():
    mapper = AtomIndexTypeMapper()
    assert mapper.num_types() == 0
    assert mapper.get_type(17) == 17
    assert mapper.get_type_names() == []
