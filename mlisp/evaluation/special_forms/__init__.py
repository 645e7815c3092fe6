"""Registry of special forms for the mlisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table, by exact head symbol, before ordinary
function application. Every handler takes the unevaluated operands, the
current environment and the evaluator function.
"""

from mlisp.types.symbol import Symbol
from mlisp.evaluation.special_forms.def_form import def_form
from mlisp.evaluation.special_forms.let_form import let_form
from mlisp.evaluation.special_forms.do_form import do_form
from mlisp.evaluation.special_forms.if_form import if_form
from mlisp.evaluation.special_forms.fn_form import fn_form
from mlisp.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("def!"): def_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): fn_form,
    Symbol("quote"): quote_form,
}
