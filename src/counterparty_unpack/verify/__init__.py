"""Verification of decoded payloads against external claims."""

from .aliases import (
    FIELD_ALIASES as FIELD_ALIASES,
)
from .aliases import (
    aliases_for as aliases_for,
)
from .aliases import (
    lookup as lookup,
)
from .compare import (
    assets_equal as assets_equal,
)
from .compare import (
    quantities_equal as quantities_equal,
)
from .compare import (
    to_int as to_int,
)
from .compare import (
    values_equal as values_equal,
)
from .compose import (
    COMPOSE_TYPE_IDS as COMPOSE_TYPE_IDS,
)
from .compose import (
    verify_compose as verify_compose,
)
from .engine import (
    compare_record as compare_record,
)
from .engine import (
    external_sends as external_sends,
)
from .policy import (
    ApprovalPolicy as ApprovalPolicy,
)
from .policy import (
    Decision as Decision,
)
from .provider import (
    ExternalDescription as ExternalDescription,
)
from .provider import (
    verify as verify,
)
from .result import (
    ComposeVerificationResult as ComposeVerificationResult,
)
from .result import (
    Mismatch as Mismatch,
)
from .result import (
    VerificationResult as VerificationResult,
)
from .schema import (
    PARAM_SCHEMA as PARAM_SCHEMA,
)
from .schema import (
    Criticality as Criticality,
)
from .schema import (
    FieldKind as FieldKind,
)
from .schema import (
    MessageSchema as MessageSchema,
)
from .schema import (
    ParamSpec as ParamSpec,
)
from .schema import (
    critical_params as critical_params,
)
from .schema import (
    dangerous_params as dangerous_params,
)
from .schema import (
    get_message_schema as get_message_schema,
)
from .schema import (
    get_schema_by_type_id as get_schema_by_type_id,
)

__all__ = [
    "COMPOSE_TYPE_IDS",
    "FIELD_ALIASES",
    "PARAM_SCHEMA",
    "ApprovalPolicy",
    "ComposeVerificationResult",
    "Criticality",
    "Decision",
    "ExternalDescription",
    "FieldKind",
    "MessageSchema",
    "Mismatch",
    "ParamSpec",
    "VerificationResult",
    "aliases_for",
    "assets_equal",
    "compare_record",
    "critical_params",
    "dangerous_params",
    "external_sends",
    "get_message_schema",
    "get_schema_by_type_id",
    "lookup",
    "quantities_equal",
    "to_int",
    "values_equal",
    "verify",
    "verify_compose",
]
