"""파일 이름에서 확장자와 stem을 분리하는 유틸리티."""


def file_extension(path: str) -> str:
    """마지막 경로 요소의 확장자를 선행 '.'를 포함해 반환한다. 없으면 빈 문자열."""
    base = path.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    if dot == -1:
        return ""
    return base[dot:]


def file_stem(file_name: str, ext: str) -> str:
    if not ext or not file_name.endswith(ext):
        raise ValueError(f"file name {file_name!r} does not end with extension {ext!r}")
    return file_name[: len(file_name) - len(ext)]
