"""크롭 변형 파일 이름(-<width>x<height>.<ext>) 접미사를 해석합니다."""

from crop_replace.schemas.crop import Crop

_MAX_DIMENSION = 2**64 - 1

_WIDTH, _HEIGHT, _DONE = range(3)


def parse_crop_suffix(suffix: str, ext: str) -> Crop | None:
    """Parse the text that follows a file stem as a crop variant suffix.

    suffix is everything after the stem (for "photo-600x340.png" with the
    stem "photo" it is "-600x340.png") and ext carries its leading dot.
    Anything may follow the extension. Returns None when suffix does not
    begin with "-<digits>x<digits><ext>".
    """
    if not suffix or suffix[0] != "-":
        return None

    state = _WIDTH
    width_chars: list[str] = []
    height_chars: list[str] = []
    for c in suffix[1:]:
        if "0" <= c <= "9":
            if state == _WIDTH:
                width_chars.append(c)
            else:
                height_chars.append(c)
        elif c == "x" and state == _WIDTH:
            if not width_chars:
                return None
            state = _HEIGHT
        elif c == "." and state == _HEIGHT:
            state = _DONE
            break
        else:
            return None

    if not width_chars or not height_chars:
        return None

    w, h = "".join(width_chars), "".join(height_chars)
    # 확장자가 높이 바로 뒤에 와야 한다 ("-850x1080.900.jpg" 거부)
    if not suffix.startswith(f"-{w}x{h}{ext}"):
        return None

    try:
        width, height = int(w), int(h)
    except ValueError:
        # int 변환 자릿수 제한 초과
        return None
    if width > _MAX_DIMENSION or height > _MAX_DIMENSION:
        return None
    return Crop(dimensions=f"{w}x{h}", width=width, height=height)
