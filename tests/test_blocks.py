from dxfdraw.blocks import Block, Blocks, Classes, DxfClass
from dxfdraw.formatter import AsciiFormatter
from dxfdraw.layer import Layer
from dxfdraw.symbols import HandleCounter


def _pairs(text):
    lines = text.split("\n")[:-1]
    return list(zip(lines[::2], lines[1::2]))


def test_default_blocks():
    assert [b.name for b in Blocks()] == [
        "*Model_Space",
        "*Paper_Space",
        "*Paper_Space0",
    ]


def test_block_set_handle_takes_two():
    block = Block("B")
    counter = HandleCounter(1)
    block.set_handle(counter)
    assert (block.handle, block.end_handle) == (1, 2)
    assert counter.value == 3


def test_blocks_set_handle_covers_all():
    blocks = Blocks()
    counter = HandleCounter(1)
    blocks.set_handle(counter)
    handles = [h for b in blocks for h in (b.handle, b.end_handle)]
    assert handles == list(range(1, 2 * len(blocks) + 1))


def test_block_format():
    block = Block("Door", "a door", layer=Layer("frames"))
    block.set_handle(HandleCounter(1))
    pairs = _pairs(block.format_string(AsciiFormatter()))
    assert pairs[:2] == [("0", "BLOCK"), ("5", "1")]
    assert ("8", "frames") in pairs
    assert ("2", "Door") in pairs
    assert ("3", "Door") in pairs
    assert ("1", "a door") in pairs
    end = pairs.index(("0", "ENDBLK"))
    assert pairs[end + 1] == ("5", "2")
    assert pairs[-1] == ("100", "AcDbBlockEnd")


def test_blocks_add_and_format():
    blocks = Blocks()
    blocks.add(Block("Extra"))
    assert len(blocks) == 4
    pairs = _pairs(blocks.format_string(AsciiFormatter()))
    assert pairs[:2] == [("0", "SECTION"), ("2", "BLOCKS")]
    assert pairs.count(("0", "BLOCK")) == 4
    assert pairs[-1] == ("0", "ENDSEC")


def test_empty_classes_section():
    text = Classes().format_string(AsciiFormatter())
    assert text == "0\nSECTION\n2\nCLASSES\n0\nENDSEC\n"


def test_classes_with_entry_and_no_handles():
    classes = Classes([DxfClass()])
    counter = HandleCounter(7)
    classes.set_handle(counter)
    assert counter.value == 7
    pairs = _pairs(classes.format_string(AsciiFormatter()))
    assert ("0", "CLASS") in pairs
    assert str(DxfClass()) == "0\nCLASS\n"