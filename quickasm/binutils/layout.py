""" The memory layout used to link every snippet.

Code is placed at address zero, so that the extracted binary starts with
the first instruction.
"""


MEMORY_MAP = b"""
SECTIONS
{
    .text 0 :  { *(.text*) }
    .data : { *(.data*) }
    .rodata : { *(.rodata*) }
    .bss : {
        *(.bss*)
        *(COMMON)
        . = ALIGN(8);
    }
}
"""


def link_layout():
    """ Get the linker script text """
    return MEMORY_MAP
