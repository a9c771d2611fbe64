MARKDOWN_EXTENSIONS = {".md"}


def is_markdown_file(file_name: str) -> bool:
    return any(file_name.lower().endswith(ext) for ext in MARKDOWN_EXTENSIONS)


def base_name(file_path: str) -> str:
    return file_path.rsplit("/", 1)[-1]
