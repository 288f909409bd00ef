"""lei — validated Legal Entity Identifiers (ISO 17442).

    >>> from lei import parse, unwrap
    >>> lei = unwrap(parse("YZ83GD8L7GG84979J516"))
    >>> lei.lou_id, lei.entity_id, lei.check_digits
    ('YZ83', 'GD8L7GG84979J5', '16')
"""

import logging

from lei.core import (
    LEI as LEI,
)
from lei.core import (
    Err as Err,
)
from lei.core import (
    InvalidCharacter as InvalidCharacter,
)
from lei.core import (
    InvalidCheckDigitFormat as InvalidCheckDigitFormat,
)
from lei.core import (
    InvalidCheckDigits as InvalidCheckDigits,
)
from lei.core import (
    InvalidEntityIdLength as InvalidEntityIdLength,
)
from lei.core import (
    InvalidLength as InvalidLength,
)
from lei.core import (
    InvalidLouIdLength as InvalidLouIdLength,
)
from lei.core import (
    InvalidPayloadLength as InvalidPayloadLength,
)
from lei.core import (
    LEIError as LEIError,
)
from lei.core import (
    Ok as Ok,
)
from lei.core import (
    Result as Result,
)
from lei.core import (
    build_from_parts as build_from_parts,
)
from lei.core import (
    build_from_payload as build_from_payload,
)
from lei.core import (
    compute_check_digits as compute_check_digits,
)
from lei.core import (
    parse as parse,
)
from lei.core import (
    parse_loose as parse_loose,
)
from lei.core import (
    sequence as sequence,
)
from lei.core import (
    unwrap as unwrap,
)
from lei.core import (
    validate as validate,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
