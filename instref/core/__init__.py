"""instref.core -- public API for core types."""

from instref.core.dates import (
    UNSET_DATE as UNSET_DATE,
)
from instref.core.dates import (
    format_date as format_date,
)
from instref.core.dates import (
    from_ymd as from_ymd,
)
from instref.core.dates import (
    to_ymd as to_ymd,
)
from instref.core.errors import (
    InstrefError as InstrefError,
)
from instref.core.errors import (
    UnknownLabelError as UnknownLabelError,
)
from instref.core.result import (
    Err as Err,
)
from instref.core.result import (
    Ok as Ok,
)
from instref.core.result import (
    Result as Result,
)
from instref.core.types import (
    UtcDatetime as UtcDatetime,
)
