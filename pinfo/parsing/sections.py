"""
Turns the PE section table into SectionHeader records.
"""
from pinfo.report import SectionHeader


def section_name(section):
    """Section name without the NUL padding."""
    return section.Name.rstrip(b'\x00').decode('utf-8', errors='replace')


def collect_sections(pe):
    """Every section header in file order."""
    return tuple(
        SectionHeader(
            name=section_name(section),
            virtual_size=section.Misc_VirtualSize,
            virtual_address=section.VirtualAddress,
            size_of_raw_data=section.SizeOfRawData,
            pointer_to_raw_data=section.PointerToRawData,
            pointer_to_relocations=section.PointerToRelocations,
            pointer_to_line_numbers=section.PointerToLinenumbers,
            number_of_relocations=section.NumberOfRelocations,
            number_of_line_numbers=section.NumberOfLinenumbers,
            characteristics=section.Characteristics
        )
        for section in pe.sections
    )


def decode_section_flags(characteristics):
    """Convert section permission flags to readable text."""
    flags = []

    flag_meanings = {
        0x00000020: 'CODE',
        0x00000040: 'INITIALIZED_DATA',
        0x00000080: 'UNINITIALIZED_DATA',
        0x02000000: 'DISCARDABLE',
        0x04000000: 'NOT_CACHED',
        0x08000000: 'NOT_PAGED',
        0x10000000: 'SHARED',
        0x20000000: 'EXECUTE',
        0x40000000: 'READ',
        0x80000000: 'WRITE'
    }

    for flag, name in flag_meanings.items():
        if characteristics & flag:
            flags.append(name)

    return ' | '.join(flags) if flags else 'NONE'
