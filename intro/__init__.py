# Intro package
from .program import (
    ProgramInputs,
    add,
    build_greeting,
    format_bool,
    greet,
    is_even,
    main,
    run,
)

__all__ = [
    'ProgramInputs',
    'add',
    'build_greeting',
    'format_bool',
    'greet',
    'is_even',
    'main',
    'run',
]
