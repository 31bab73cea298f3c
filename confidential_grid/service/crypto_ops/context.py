from openfhe import *


# ============================================================================
# OpenFHE BinFHE Context & Parameters
# ============================================================================

PARAMSETS = {
    "TOY": TOY,
    "MEDIUM": MEDIUM,
    "STD128": STD128,
}


def create_binfhe_context(paramset: str = "TOY"):
    """
    Create a FHEW/TFHE context for boolean gate evaluation.

    Args:
        paramset: Security level name. TOY is fast and insecure, meant for
            tests and local play; STD128 is the production setting.

    Returns:
        OpenFHE BinFHEContext
    """
    if paramset not in PARAMSETS:
        raise ValueError(f"Unknown BinFHE parameter set: {paramset}")

    cc = BinFHEContext()
    cc.GenerateBinFHEContext(PARAMSETS[paramset])
    return cc
