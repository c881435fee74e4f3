"""txledger.ledger — Transaction records, client accounts and the account registry."""

from txledger.ledger.account import AccountSnapshot as AccountSnapshot
from txledger.ledger.account import ApplyResult as ApplyResult
from txledger.ledger.account import ClientAccount as ClientAccount
from txledger.ledger.registry import AccountRegistry as AccountRegistry
from txledger.ledger.transactions import CHARGED_BACK as CHARGED_BACK
from txledger.ledger.transactions import DISPUTED as DISPUTED
from txledger.ledger.transactions import NORMAL as NORMAL
from txledger.ledger.transactions import RESOLVED as RESOLVED
from txledger.ledger.transactions import Chargeback as Chargeback
from txledger.ledger.transactions import Deposit as Deposit
from txledger.ledger.transactions import Dispute as Dispute
from txledger.ledger.transactions import Disputed as Disputed
from txledger.ledger.transactions import EntryStatus as EntryStatus
from txledger.ledger.transactions import LedgerEntry as LedgerEntry
from txledger.ledger.transactions import Normal as Normal
from txledger.ledger.transactions import Resolve as Resolve
from txledger.ledger.transactions import Solved as Solved
from txledger.ledger.transactions import TransactionKind as TransactionKind
from txledger.ledger.transactions import TransactionRecord as TransactionRecord
from txledger.ledger.transactions import TransactionSide as TransactionSide
from txledger.ledger.transactions import Withdrawal as Withdrawal
from txledger.ledger.transactions import can_transition as can_transition
