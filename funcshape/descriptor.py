"""Parameter-order descriptors.

A descriptor lists the names of a function's positional parameters in
order. It is how a bag of named arguments gets lined up with a function that
only takes positional arguments, and it is always given explicitly. It may
be a sequence of names or a string of names separated by commas or
whitespace, like the field names of collections.namedtuple.
"""

import keyword
from typing import Sequence, Tuple, Union

import parsy

from funcshape.errors import (
    InvalidDescriptorError,
    format_duplicate_name_error,
    format_not_an_identifier_error,
    format_unparsable_descriptor_error,
)

Descriptor = Union[str, Sequence[str]]

_whitespace = parsy.regex(r'\s*')
_name = parsy.regex(r'[^\W\d]\w*').desc('parameter name')
_separator = parsy.regex(r'\s*,\s*|\s+').desc('comma or space')

# descriptor = [ name, { separator, name } ], [ "," ] ;
descriptor_parser = (
    _whitespace
    >> _name.sep_by(_separator)
    << parsy.regex(r'\s*,?\s*')
    << parsy.eof
)


def parse_parameter_order(descriptor: Descriptor) -> Tuple[str, ...]:
    if isinstance(descriptor, str):
        try:
            names = descriptor_parser.parse(descriptor)
        except parsy.ParseError as e:
            raise InvalidDescriptorError(
                format_unparsable_descriptor_error(
                    descriptor, ' or '.join(sorted(e.expected))
                )
            ) from e
    else:
        names = list(descriptor)
    return _validate(names)


def _validate(names: Sequence[object]) -> Tuple[str, ...]:
    seen = set()
    for name in names:
        if (
            not isinstance(name, str)
            or not name.isidentifier()
            or keyword.iskeyword(name)
        ):
            raise InvalidDescriptorError(format_not_an_identifier_error(name))
        if name in seen:
            raise InvalidDescriptorError(format_duplicate_name_error(name))
        seen.add(name)
    return tuple(names)  # type: ignore
