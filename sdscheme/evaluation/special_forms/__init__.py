"""Registry of special forms for the sdscheme evaluator.

Maps keyword Symbols to handler functions `(tail, env, evaluate_fn)`. The
evaluator consults this table before ordinary procedure application, so these
keywords cannot be shadowed by bindings.
"""

from sdscheme.types.symbol import Symbol
from sdscheme.evaluation.special_forms.quote_form import quote_form
from sdscheme.evaluation.special_forms.if_form import if_form
from sdscheme.evaluation.special_forms.cond_form import cond_form
from sdscheme.evaluation.special_forms.define_form import define_form
from sdscheme.evaluation.special_forms.set_form import set_form
from sdscheme.evaluation.special_forms.lambda_form import lambda_form
from sdscheme.evaluation.special_forms.let_forms import let_form, let_star_form
from sdscheme.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    Symbol("begin"): begin_form,
}
