"""Tests for user-facing error messages."""

from bracket_validator.error_details import get_error_human_message


class TestGetErrorHumanMessage:
    """Tests for get_error_human_message()."""

    def test_file_not_found(self):
        error = FileNotFoundError(2, "No such file or directory", "in.txt")

        assert get_error_human_message(error) == "File not found: in.txt"

    def test_is_a_directory(self):
        error = IsADirectoryError(21, "Is a directory", "inputs")

        assert "directory: inputs" in get_error_human_message(error)

    def test_permission_denied(self):
        error = PermissionError(13, "Permission denied", "secret.txt")

        message = get_error_human_message(error)
        assert message.startswith("Permission denied: secret.txt")
        assert "Check file permissions" in message

    def test_unicode_decode_error(self):
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        message = get_error_human_message(error)
        assert "not valid utf-8 text" in message
        assert "byte offset 0" in message

    def test_generic_os_error(self):
        message = get_error_human_message(OSError("disk on fire"))

        assert message == "System error: disk on fire"

    def test_unknown_exception(self):
        assert get_error_human_message(RuntimeError("boom")) == "boom"
