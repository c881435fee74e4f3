"""txledger.gateway — Record decoding and the CSV input/output boundary."""

from txledger.gateway.csv_io import EXPECTED_HEADER as EXPECTED_HEADER
from txledger.gateway.csv_io import REPORT_HEADER as REPORT_HEADER
from txledger.gateway.csv_io import has_header as has_header
from txledger.gateway.csv_io import iter_rows as iter_rows
from txledger.gateway.csv_io import open_log as open_log
from txledger.gateway.csv_io import write_report as write_report
from txledger.gateway.parser import parse_record as parse_record
