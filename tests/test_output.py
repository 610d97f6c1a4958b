# File: tests/test_output.py
"""Tests for the fixed-capacity output builder."""
from appcast_scout.constants import OUTPUT_CAPACITY
from appcast_scout.extractor import Candidate, OutputBuffer, Priority, build_output


def cand(url: str) -> Candidate:
    return Candidate(url=url, priority=Priority.LINK)


def test_newline_separated_output():
    buffer, length, written = build_output(
        [cand("https://example.com/a.xml"), cand("https://example.com/updates")]
    )
    assert buffer == b"https://example.com/a.xml\nhttps://example.com/updates\n"
    assert length == len(buffer)
    assert len(written) == 2


def test_empty_output():
    assert build_output([]) == (b"", 0, [])


def test_entry_must_leave_room_for_sentinel():
    url = "https://example.com/updates"  # 27 bytes, 28 with newline
    # 28 bytes would fill capacity 28 completely: rejected
    assert build_output([cand(url)], capacity=28) == (b"", 0, [])
    buffer, length, _ = build_output([cand(url)], capacity=29)
    assert length == 28
    assert buffer.endswith(b"\n")


def test_overflowing_entry_is_skipped_not_fatal():
    long_url = "https://example.com/updates/" + "x" * 100
    short_url = "https://example.com/rss"
    buffer, length, written = build_output([cand(long_url), cand(short_url)], capacity=64)
    assert buffer == (short_url + "\n").encode()
    assert [c.url for c in written] == [short_url]


def test_output_buffer_sentinel_written_after_payload():
    out = OutputBuffer(capacity=32)
    assert out.append(b"https://a.co/rss")
    out.terminate()
    assert len(out) == 17
    assert out.getvalue() == b"https://a.co/rss\n"
    assert out._buf[17] == 0


def test_default_capacity_holds_fifty_long_urls_partially():
    urls = [f"https://example.com/updates/{i:04d}/" + "y" * 300 for i in range(50)]
    buffer, length, written = build_output([cand(u) for u in urls])
    assert length < OUTPUT_CAPACITY
    assert len(written) == buffer.count(b"\n")
    assert 0 < len(written) < 50
