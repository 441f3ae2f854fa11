"""Registry of special forms for the flisp evaluator.

Maps node classes to handler functions. The evaluator handles literals and
variable references itself and dispatches every other node kind through this
table. Each handler receives (node, env, evaluate_fn).
"""

from flisp.types.nodes import (
    Break, Call, Comparison, Cond, Cons, Eval, Func, FunctionCall, Head, Lambda,
    List, Logical, Not, Operation, Predicate, Program, Quote, Return, Setq, Tail,
    While,
)
from flisp.evaluation.special_forms.prog_form import prog_form
from flisp.evaluation.special_forms.set_form import set_form
from flisp.evaluation.special_forms.lambda_form import func_form, lambda_form
from flisp.evaluation.special_forms.call_forms import call_form, function_call_form
from flisp.evaluation.special_forms.while_form import while_form
from flisp.evaluation.special_forms.cond_form import cond_form
from flisp.evaluation.special_forms.control_forms import break_form, return_form
from flisp.evaluation.special_forms.arithmetic_forms import operation_form
from flisp.evaluation.special_forms.compare_forms import comparison_form
from flisp.evaluation.special_forms.logic_forms import logical_form, not_form
from flisp.evaluation.special_forms.predicate_forms import predicate_form
from flisp.evaluation.special_forms.list_forms import cons_form, head_form, list_form, tail_form
from flisp.evaluation.special_forms.quote_forms import quote_form
from flisp.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    Program: prog_form,
    Setq: set_form,
    Func: func_form,
    Lambda: lambda_form,
    FunctionCall: function_call_form,
    Call: call_form,
    While: while_form,
    Cond: cond_form,
    Break: break_form,
    Return: return_form,
    Operation: operation_form,
    Comparison: comparison_form,
    Logical: logical_form,
    Not: not_form,
    Predicate: predicate_form,
    Head: head_form,
    Tail: tail_form,
    Cons: cons_form,
    List: list_form,
    Quote: quote_form,
    Eval: eval_form,
}
