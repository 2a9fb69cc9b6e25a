"""Static address tables for well-known programs, loaders and sysvars."""

from typing import Dict

from soltxview.normalizer.models import Address

SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
COMPUTE_BUDGET_PROGRAM_ID = "ComputeBudget111111111111111111111111111111"
SERUM_PROGRAM_ID = "4ckmDgGdxQoPDLUkDT3vHgSAkzA3QRdNq5ywwY4sUSJn"

EXTERNAL_PROGRAMS: Dict[str, str] = {
    SERUM_PROGRAM_ID: "Serum Program",
}

PROGRAM_IDS: Dict[str, str] = {
    "Budget1111111111111111111111111111111111111": "Budget Program",
    "Config1111111111111111111111111111111111111": "Config Program",
    "Exchange11111111111111111111111111111111111": "Exchange Program",
    "Stake11111111111111111111111111111111111111": "Stake Program",
    "Storage111111111111111111111111111111111111": "Storage Program",
    SYSTEM_PROGRAM_ID: "System Program",
    "Vest111111111111111111111111111111111111111": "Vest Program",
    "Vote111111111111111111111111111111111111111": "Vote Program",
    TOKEN_PROGRAM_ID: "SPL Token Program",
    COMPUTE_BUDGET_PROGRAM_ID: "Compute Budget Program",
    **EXTERNAL_PROGRAMS,
}

LOADER_IDS: Dict[str, str] = {
    "MoveLdr111111111111111111111111111111111111": "Move Loader",
    "NativeLoader1111111111111111111111111111111": "Native Loader",
    "BPFLoader1111111111111111111111111111111111": "BPF Loader",
    "BPFLoader2111111111111111111111111111111111": "BPF Loader 2",
}

SYSVAR_IDS: Dict[str, str] = {
    "SysvarC1ock11111111111111111111111111111111": "SYSVAR_CLOCK",
    "SysvarEpochSchedu1e111111111111111111111111": "SYSVAR_EPOCH_SCHEDULE",
    "SysvarFees111111111111111111111111111111111": "SYSVAR_FEES",
    "SysvarRecentB1ockHashes11111111111111111111": "SYSVAR_RECENT_BLOCKHASHES",
    "SysvarRent111111111111111111111111111111111": "SYSVAR_RENT",
    "SysvarRewards111111111111111111111111111111": "SYSVAR_REWARDS",
    "SysvarS1otHashes111111111111111111111111111": "SYSVAR_SLOT_HASHES",
    "SysvarS1otHistory11111111111111111111111111": "SYSVAR_SLOT_HISTORY",
    "SysvarStakeHistory1111111111111111111111111": "SYSVAR_STAKE_HISTORY",
}

# Bare sysvar id; every sysvar address shares its base58 prefix.
SYSVAR_ID = "Sysvar1111111111111111111111111111111111111"
SYSVAR_PREFIX = "Sysvar"
SYSVAR_LABEL = "SYSVAR"


def by_address(table: Dict[str, str]) -> Dict[Address, str]:
    """Re-keys a base58 table by Address so lookups compare raw bytes."""
    return {Address.from_string(key): label for key, label in table.items()}
