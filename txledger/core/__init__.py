"""txledger.core — public API for all core types."""

from txledger.core.errors import (
    FieldViolation as FieldViolation,
)
from txledger.core.errors import (
    IllegalTransitionError as IllegalTransitionError,
)
from txledger.core.errors import (
    InputError as InputError,
)
from txledger.core.errors import (
    LedgerError as LedgerError,
)
from txledger.core.errors import (
    ValidationError as ValidationError,
)
from txledger.core.identifiers import (
    ClientId as ClientId,
)
from txledger.core.identifiers import (
    TxId as TxId,
)
from txledger.core.money import (
    LEDGER_DECIMAL_CONTEXT as LEDGER_DECIMAL_CONTEXT,
)
from txledger.core.money import (
    TICK_PLACES as TICK_PLACES,
)
from txledger.core.money import (
    Amount as Amount,
)
from txledger.core.result import (
    Err as Err,
)
from txledger.core.result import (
    Ok as Ok,
)
from txledger.core.result import (
    Result as Result,
)
from txledger.core.result import (
    unwrap as unwrap,
)
