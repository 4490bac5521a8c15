"""Registry of special forms for the Wahlberg evaluator.

Maps Idents to handler functions that receive their arguments unevaluated.
The evaluator consults this table before treating a call as a user function
call, so these names cannot be redefined as functions.
"""

from wahlberg.types.ident import Ident
from wahlberg.evaluation.special_forms.if_form import if_form
from wahlberg.evaluation.special_forms.arithmetic_forms import add_form, sub_form, mul_form, div_form

SPECIAL_FORMS = {
    Ident("+"): add_form,
    Ident("-"): sub_form,
    Ident("*"): mul_form,
    Ident("/"): div_form,
    Ident("if"): if_form,
}
