"""File formats from which batches of expressions can be read.

Subclassing :class:`Filetype` registers the subclass automatically, which adds it to the ``rpncalc`` command line
arguments and to MIME type detection in :func:`get_filetype`.

Attributes:
    FILETYPES_BY_MIME (Dict[str, Filetype]): Registered filetypes, by MIME type.
    FILETYPES_BY_TYPENAME (Dict[str, Filetype]): Registered filetypes, by short type name.

"""

import json
import mimetypes
import os
from abc import ABCMeta, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import json5
from yaml import load_all, YAMLError
try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader


FILETYPES_BY_MIME: Dict[str, 'Filetype'] = {}
FILETYPES_BY_TYPENAME: Dict[str, 'Filetype'] = {}


class FiletypeWatcher(ABCMeta):
    """Metaclass for :class:`Filetype` that registers every concrete subclass."""
    def __init__(cls, name, bases, clsdict):
        super().__init__(name, bases, clsdict)
        if len(cls.mro()) > 2:
            # Instantiate a version of the filetype to add it to our global dicts:
            instance = cls()
            assert instance.name in FILETYPES_BY_TYPENAME
            assert instance.default_mimetype in FILETYPES_BY_MIME


def as_expression_list(document: Any, path: str) -> List[str]:
    """Checks that a parsed document is a string or a list of strings, and returns it as a list.

    Raises:
        ValueError: If the document has any other shape.

    """
    if isinstance(document, str):
        return [document]
    elif isinstance(document, list):
        for i, item in enumerate(document):
            if not isinstance(item, str):
                raise ValueError(f"Error parsing {os.path.basename(path)}: item {i} is {item!r}, "
                                 "not an expression string")
        return document
    raise ValueError(f"Error parsing {os.path.basename(path)}: expected an expression string or a list of expression "
                     f"strings, instead found {type(document).__name__}")


class Filetype(metaclass=FiletypeWatcher):
    """Abstract base class from which all expression file formats should extend."""

    def __init__(self, type_name: str, default_mimetype: str, *mimetypes: str):
        """Initializes a new file format type.

        Args:
            type_name: A short name used to select this :class:`Filetype` from the command line.
            default_mimetype: The default mimetype to be assigned to this :class:`Filetype`.
            *mimetypes: Zero or more additional mimetypes that should be associated with this :class:`Filetype`.

        Raises:
            ValueError: The :obj:`type_name` and/or one of the mimetypes conflicts with that of a preexisting
                :class:`Filetype`.

        """
        self.name: str = type_name
        self.default_mimetype: str = default_mimetype
        self.mimetypes: Tuple[str, ...] = (default_mimetype,) + tuple(mimetypes)
        for mime_type in self.mimetypes:
            if mime_type in FILETYPES_BY_MIME:
                raise ValueError(f"MIME type {mime_type} is already assigned to {FILETYPES_BY_MIME[mime_type]}")
            FILETYPES_BY_MIME[mime_type] = self
        if type_name in FILETYPES_BY_TYPENAME:
            raise ValueError(
                f'Type {type_name} is already associated with Filetype {FILETYPES_BY_TYPENAME[type_name]}')
        FILETYPES_BY_TYPENAME[self.name] = self

    @abstractmethod
    def load_expressions(self, path: str) -> List[str]:
        """Reads the expression strings stored in a file of this type.

        Raises:
            ValueError: If the file cannot be parsed or does not contain expression strings.

        """
        raise NotImplementedError()

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class TextFile(Filetype):
    """Plain text with one expression per line. Blank lines and lines starting with ``#`` are skipped."""
    def __init__(self):
        super().__init__('text', 'text/plain')

    def load_expressions(self, path: str) -> List[str]:
        with open(path) as f:
            return [
                line.strip() for line in f
                if line.strip() and not line.lstrip().startswith('#')
            ]


class JSON(Filetype):
    """A JSON array of expression strings."""
    def __init__(self):
        super().__init__('json', 'application/json', 'text/json')

    def load_expressions(self, path: str) -> List[str]:
        with open(path) as f:
            try:
                document = json.load(f)
            except json.decoder.JSONDecodeError as de:
                raise ValueError(f'Error parsing {os.path.basename(path)}: {de.msg}: line {de.lineno}, column '
                                 f'{de.colno} (char {de.pos})')
        return as_expression_list(document, path)


class JSON5(Filetype):
    """A JSON5 array of expression strings."""
    def __init__(self):
        super().__init__('json5', 'application/json5', 'text/x-json5')

    def load_expressions(self, path: str) -> List[str]:
        with open(path) as f:
            try:
                document = json5.load(f)
            except ValueError as ve:
                raise ValueError(f'Error parsing {os.path.basename(path)}: {ve!s}')
        return as_expression_list(document, path)


class YAML(Filetype):
    """A YAML sequence of expression strings. Multiple documents are concatenated."""
    def __init__(self):
        super().__init__('yaml', 'application/x-yaml', 'application/yaml', 'text/yaml', 'text/x-yaml')

    def load_expressions(self, path: str) -> List[str]:
        with open(path, 'rb') as stream:
            try:
                documents = list(load_all(stream, Loader=SafeLoader))
            except YAMLError as ye:
                raise ValueError(f'Error parsing {os.path.basename(path)}: {ye!s}')
        expressions = []
        for document in documents:
            if document is not None:
                expressions.extend(as_expression_list(document, path))
        return expressions


def init_mimetypes():
    """Registers the file extensions that :mod:`mimetypes` does not know about by default."""
    mimetypes.init()
    if '.yml' not in mimetypes.types_map and '.yaml' not in mimetypes.types_map:
        mimetypes.add_type('application/x-yaml', '.yml')
        mimetypes.suffix_map['.yaml'] = '.yml'
    elif '.yml' not in mimetypes.types_map:
        mimetypes.suffix_map['.yml'] = '.yaml'
    elif '.yaml' not in mimetypes.types_map:
        mimetypes.suffix_map['.yaml'] = '.yml'
    if '.json5' not in mimetypes.types_map:
        mimetypes.add_type('application/json5', '.json5')


def get_filetype(path: Optional[str] = None, mime_type: Optional[str] = None) -> Filetype:
    """Looks up the filetype for the given path.

    At least one of :obj:`path` or :obj:`mime_type` must be not :const:`None`. If both are provided, only
    :obj:`mime_type` will be used. If only :obj:`path` is provided, its mimetype will be guessed using
    :func:`mimetypes.guess_type`; call :func:`init_mimetypes` once beforehand so that YAML and JSON5 extensions are
    recognized.

    Raises:
        ValueError: If both :obj:`path` and :obj:`mime_type` are :const:`None`.
        ValueError: If the MIME type could not be determined or is not supported by any registered :class:`Filetype`.

    """
    if path is None and mime_type is None:
        raise ValueError("get_filetype requires a path or a MIME type")
    elif mime_type is None:
        mime_type = mimetypes.guess_type(path)[0]
    if mime_type is None:
        raise ValueError(f"Could not determine the filetype for {path}")
    elif mime_type not in FILETYPES_BY_MIME:
        raise ValueError(f"Unsupported MIME type {mime_type} for {path}")
    else:
        return FILETYPES_BY_MIME[mime_type]
