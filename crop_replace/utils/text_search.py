"""본문 문자열에서 부분 문자열 위치를 찾는 유틸리티."""


def string_indexes(s: str, substr: str) -> list[int]:
    """Return the offsets in s at which substr occurs.

    Matches do not overlap: after a match at i the search resumes at
    i + len(substr), so "aaabc" yields only [0] for "aa".
    """
    indexes: list[int] = []
    if not substr:
        return indexes
    found = s.find(substr)
    while found != -1:
        indexes.append(found)
        found = s.find(substr, found + len(substr))
    return indexes
