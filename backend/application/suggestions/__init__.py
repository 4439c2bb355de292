"""
Next-step suggestions shown after a calculator produces a result.
"""
