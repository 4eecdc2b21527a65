"""Registry of special forms for the Slang evaluator.

Maps each SpecialForm to the handler implementing it. The evaluator consults
this table whenever an application is headed by a special form. Handlers
receive the unevaluated operands, the frame stack and the evaluator.
"""

from slang.types.special_form import SpecialForm
from slang.evaluation.special_forms.def_form import def_form
from slang.evaluation.special_forms.lambda_form import lambda_form
from slang.evaluation.special_forms.apply_forms import id_form, ignore_form, nil_form
from slang.evaluation.special_forms.reserved_forms import arrow_form, external_form

SPECIAL_FORMS = {
    SpecialForm.DEF: def_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.ARROW: arrow_form,
    SpecialForm.EXTERNAL: external_form,
    SpecialForm.ID: id_form,
    SpecialForm.IGNORE: ignore_form,
    SpecialForm.NIL: nil_form,
}
