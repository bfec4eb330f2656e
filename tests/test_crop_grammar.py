"""크롭 접미사 파싱 규칙을 검증합니다."""

from crop_replace.services.crop_grammar import parse_crop_suffix


def test_parse_crop_suffix_accepts_dimensions_followed_by_extension():
    cases = [
        ("-600x340.png", ".png", ("600x340", 600, 340)),
        ("-1024x768.jpeg", ".jpeg", ("1024x768", 1024, 768)),
        ("-600x340.png_more-stuff", ".png", ("600x340", 600, 340)),
        ("-500x370.jpg'=anything-can-follow", ".jpg", ("500x370", 500, 370)),
        ("-007x0100.gif", ".gif", ("007x0100", 7, 100)),
    ]
    for suffix, ext, (dimensions, width, height) in cases:
        crop = parse_crop_suffix(suffix, ext)
        assert crop is not None, suffix
        assert crop.dimensions == dimensions
        assert crop.width == width
        assert crop.height == height


def test_parse_crop_suffix_rejects_malformed_suffixes():
    cases = [
        ("-x.jpg", ".jpg"),
        ("-.png", ".png"),
        ("-850x1080x900.jpg", ".jpg"),
        ("-850x1080.900.jpg", ".jpg"),
        ("-file-other.jpeg", ".jpeg"),
        ("-1024x768.jpeg", ".png"),
        ("_1024x768.jpeg", ".jpeg"),
        ("_something-else.jpg", ".jpg"),
        ("234x424.png", ".png"),
        (".jpeg", ".jpeg"),
        ("", ".png"),
        ("-600x.png", ".png"),
        ("-600x340", ".png"),
        ("-600X340.png", ".png"),
        ("-60 0x340.png", ".png"),
    ]
    for suffix, ext in cases:
        assert parse_crop_suffix(suffix, ext) is None, suffix


def test_parse_crop_suffix_treats_overflowing_dimensions_as_no_match():
    too_wide = str(2**64)
    assert parse_crop_suffix(f"-{too_wide}x10.png", ".png") is None
    assert parse_crop_suffix(f"-10x{too_wide}.png", ".png") is None

    assert parse_crop_suffix("-" + "9" * 5000 + "x10.png", ".png") is None
    assert parse_crop_suffix("-10x" + "9" * 5000 + ".png", ".png") is None

    padded = "0" * 30 + "7"
    crop = parse_crop_suffix(f"-{padded}x10.png", ".png")
    assert crop is not None
    assert crop.width == 7

    largest = str(2**64 - 1)
    crop = parse_crop_suffix(f"-{largest}x10.png", ".png")
    assert crop is not None
    assert crop.width == 2**64 - 1
