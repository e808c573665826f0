import io

import pytest

from procnet.errors import ParseError
from procnet.partitions import PartitionEntry, parse_partitions

SAMPLE = """major minor  #blocks  name

 259        0 1000204632 nvme0n1
 259        1    1048576 nvme0n1p1
 259        2    1048576 nvme0n1p2
 259        3  104857600 nvme0n1p3
 259        4  893248512 nvme0n1p4
 253        0  104841216 dm-0
 252        0    8388608 zram0
 253        1  893232128 dm-1
   8        0    3953664 sda
   8        1    2097152 sda1
   8        2    1855488 sda2
 253        2    1853440 dm-2
"""


def test_partitions():
    partitions = parse_partitions(io.StringIO(SAMPLE))
    assert len(partitions) == 12

    assert partitions[3].major == 259
    assert partitions[3].minor == 3
    assert partitions[3].blocks == 104857600
    assert partitions[3].name == "nvme0n1p3"

    assert partitions[11].major == 253
    assert partitions[11].minor == 2
    assert partitions[11].blocks == 1853440
    assert partitions[11].name == "dm-2"


def test_partitions_from_list_of_lines():
    partitions = parse_partitions(SAMPLE.splitlines())
    assert partitions[0] == PartitionEntry(major=259, minor=0, blocks=1000204632, name="nvme0n1")


def test_header_only_gives_no_entries():
    assert parse_partitions(["major minor  #blocks  name", ""]) == []


def test_major_out_of_range():
    with pytest.raises(ParseError):
        parse_partitions(["header", "", " 70000 0 10 sda"])


def test_non_numeric_blocks():
    with pytest.raises(ParseError):
        parse_partitions(["header", "", " 8 0 many sda"])


def test_missing_name():
    with pytest.raises(ParseError):
        parse_partitions(["header", "", " 8 0 10"])