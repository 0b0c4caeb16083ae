import pytest

from clings.text import (
    count_length,
    count_text,
    find_occurrences,
    join_sentences,
    read_names,
    replace_gene,
    same_sequence,
    write_names,
)

LONGEST = "pneumonoultramicroscopicsilicovolcanoconiosis"
GENOTYPE = "XX  XXh  XhY  XY"


def test_count_length_agrees_with_builtin():
    assert count_length(LONGEST) == len(LONGEST)


def test_count_length_empty():
    assert count_length("") == 0


def test_join_sentences():
    joined = join_sentences(
        "Genetic engineering is based on two main discoveries.",
        "Presence of plasmid in Bacteria and",
        "Restriction endonuclease",
    )
    assert joined.startswith("Genetic engineering")
    assert joined.endswith("Restriction endonuclease")
    assert "discoveries. Presence" in joined


def test_same_sequence():
    first = "ctgttcgttacaaggtggcgtcaaa"
    second = "cccgaggctatccatcgggaggaac"
    assert same_sequence(first, second) is False
    assert same_sequence(first, first) is True


def test_find_occurrences_in_genotype():
    found = find_occurrences(GENOTYPE, "Xh")
    assert len(found) == GENOTYPE.count("Xh")
    assert all(GENOTYPE[i:i + 2] == "Xh" for i in found)
    assert found == sorted(found)


def test_find_occurrences_overlapping():
    assert find_occurrences("aaa", "aa") == [0, 1]


def test_find_occurrences_absent():
    assert find_occurrences("XX  XY", "Xh") == []


def test_find_occurrences_empty_word():
    with pytest.raises(ValueError):
        find_occurrences(GENOTYPE, "")


def test_replace_gene():
    assert replace_gene("t1 t1 t2 t2", "t2", "T2") == "t1 t1 T2 T2"


def test_replace_gene_empty():
    with pytest.raises(ValueError):
        replace_gene("t1", "", "T")


def test_count_text_characters_are_length():
    text = "Tar Nicotine\tCarbon monoxide\n"
    assert count_text(text).characters == len(text)


def test_count_text_empty():
    assert count_text("") == (0, 0)


def test_count_text_words():
    assert count_text("one two three").words == 3


def test_names_round_trip(tmp_path):
    path = tmp_path / "cigcomponent"
    names = ["Tar", "Nicotine", "Benzene"]
    write_names(path, names)
    assert read_names(path) == names


def test_write_names_format(tmp_path):
    path = tmp_path / "cigcomponent"
    write_names(path, ["Tar"])
    assert path.read_text(encoding="utf-8") == "\nName: Tar \n"


def test_write_names_rejects_spaces(tmp_path):
    with pytest.raises(ValueError):
        write_names(tmp_path / "cigcomponent", ["carbon monoxide"])


def test_read_names_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_names(tmp_path / "absent")