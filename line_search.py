from table_desc import DataDesc, ExportOptions, LineFlag, LineInfo, ScreenDesc


def _use_ignore_case(pattern: str, options: ExportOptions) -> bool:
    if options.ignore_case:
        return True
    if options.ignore_lower_case:
        return not any(ch.isupper() for ch in pattern)
    return False


def row_matches(row: bytes, pattern: str, options: ExportOptions) -> bool:
    if not pattern:
        return False
    text = bytes(row).decode("latin-1" if options.force8bit else "utf-8", errors="replace")
    if _use_ignore_case(pattern, options):
        return pattern.lower() in text.lower()
    return pattern in text


def ensure_line_info(desc: DataDesc, scrdesc: ScreenDesc, options: ExportOptions, rownum: int):
    """Return the row's LineInfo with FOUNDSTR evaluated for the active search."""
    pattern = scrdesc.search_pattern
    info = desc.line_info.get(rownum)
    if not pattern:
        return info

    key = (pattern, _use_ignore_case(pattern, options))
    if info is not None and info.search_key == key:
        return info

    if info is None:
        info = LineInfo()
        desc.line_info[rownum] = info

    if row_matches(desc.rows[rownum], pattern, options):
        info.mask |= LineFlag.FOUNDSTR
    else:
        info.mask &= ~LineFlag.FOUNDSTR
    info.search_key = key
    return info
