from charset_normalizer import from_path

DEFAULT_ENCODING = "utf-8"


def detect_encoding(file_path: str) -> str:
    try:
        result = from_path(file_path).best()
    except Exception as error:
        print(f"Can not detect encoding for {file_path}: {error}")
        return DEFAULT_ENCODING

    if result is None or not result.encoding:
        return DEFAULT_ENCODING
    # ascii is a subset of utf-8; keep utf-8 so later non-ascii edits still decode
    if result.encoding == "ascii":
        return DEFAULT_ENCODING
    return result.encoding
