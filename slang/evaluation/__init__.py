from slang.evaluation.evaluator import evaluate
from slang.evaluation.substitution import replace_free

__all__ = ["evaluate", "replace_free"]
