"""Registry of the built-in macro forms for ok.

Each form receives its raw argument nodes and returns a replacement node; the
call protocol evaluates that node in place of the original call. The table is
installed into the base scope by `ok.builtin.env_builtin.default_environment`.
"""

from ok.types.native import Macro
from ok.evaluation.special_forms.func_form import func_form
from ok.evaluation.special_forms.switch_form import switch_form
from ok.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "func": Macro("func", func_form),
    "switch": Macro("switch", switch_form),
    "let": Macro("let", let_form),
}
