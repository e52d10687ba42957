"""Registry of special forms for the Lemon evaluator.

Maps Keywords to handler functions that implement non-standard evaluation
rules. The set is fixed; the reader is the only producer of Keywords.
"""

from lemon.types.keyword import Keyword
from lemon.evaluation.special_forms.define_form import define_form
from lemon.evaluation.special_forms.lambda_form import lambda_form
from lemon.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Keyword.DEFINE: define_form,
    Keyword.LAMBDA: lambda_form,
    Keyword.IF: if_form,
}
