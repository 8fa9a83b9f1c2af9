"""instref.instrument -- instrument model, labels and rendering."""

from instref.instrument.enums import (
    BondIdType as BondIdType,
)
from instref.instrument.enums import (
    Currency as Currency,
)
from instref.instrument.enums import (
    DayCountConvention as DayCountConvention,
)
from instref.instrument.enums import (
    FloatingIndex as FloatingIndex,
)
from instref.instrument.enums import (
    FloatingIndexTenor as FloatingIndexTenor,
)
from instref.instrument.enums import (
    PaymentFrequency as PaymentFrequency,
)
from instref.instrument.enums import (
    ProductType as ProductType,
)
from instref.instrument.enums import (
    SwapLegType as SwapLegType,
)
from instref.instrument.enums import (
    SwapType as SwapType,
)
from instref.instrument.labels import (
    currency_label as currency_label,
)
from instref.instrument.labels import (
    day_count_label as day_count_label,
)
from instref.instrument.labels import (
    floating_index_label as floating_index_label,
)
from instref.instrument.labels import (
    floating_index_tenor_label as floating_index_tenor_label,
)
from instref.instrument.labels import (
    label_table as label_table,
)
from instref.instrument.labels import (
    parse_label as parse_label,
)
from instref.instrument.labels import (
    payment_frequency_label as payment_frequency_label,
)
from instref.instrument.labels import (
    swap_leg_type_label as swap_leg_type_label,
)
from instref.instrument.labels import (
    swap_type_label as swap_type_label,
)
from instref.instrument.types import (
    AnyProduct as AnyProduct,
)
from instref.instrument.types import (
    Bond as Bond,
)
from instref.instrument.types import (
    IRSwap as IRSwap,
)
from instref.instrument.types import (
    Product as Product,
)
from instref.instrument.types import (
    render as render,
)
