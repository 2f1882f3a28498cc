"""Prompt widgets built on the terminal layer."""

from .confirm import ConfirmHandler, ConfirmRequest, ask_confirm
from .editor import EditorBuffer, LineEditor, mask_echo, plain_echo
from .message import Message
from .multiselect import MultiSelectHandler, MultiSelectRequest, ask_multiselect
from .select import SelectHandler, SelectRequest, ask_select
from .spinner import Spinner
from .table import Alignment, Table
from .text import InputRequest, PasswordRequest, ask_input, ask_password

__all__ = [
    "Alignment",
    "ConfirmHandler",
    "ConfirmRequest",
    "EditorBuffer",
    "InputRequest",
    "LineEditor",
    "Message",
    "MultiSelectHandler",
    "MultiSelectRequest",
    "PasswordRequest",
    "SelectHandler",
    "SelectRequest",
    "Spinner",
    "Table",
    "ask_confirm",
    "ask_input",
    "ask_multiselect",
    "ask_password",
    "ask_select",
    "mask_echo",
    "plain_echo",
]
