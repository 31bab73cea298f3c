# ============================================================================
# Key Generation
# ============================================================================

def binfhe_keygen(cc):
    """
    Generate the secret key and the bootstrapping keys.

    Bootstrapping keys are stored inside the context and are required for
    every EvalBinGate call.

    Args:
        cc: BinFHEContext

    Returns:
        LWE secret key
    """
    secret_key = cc.KeyGen()
    cc.BTKeyGen(secret_key)
    return secret_key
