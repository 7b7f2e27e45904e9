import hypothesis.strategies as st

from dimkey import DimensionKey

bounds = st.none() | st.integers(min_value=-(2**63), max_value=2**63 - 1)

positions = st.builds(DimensionKey.position, st.integers())
ranges = st.builds(DimensionKey.range, bounds, bounds, bounds)
parsable_keys = positions | ranges


class OpaqueTensor:
    def __str__(self):
        return "OpaqueTensor()"


gathers = st.builds(DimensionKey.gather, st.builds(OpaqueTensor))
keys = parsable_keys | gathers


@st.composite
def cli_commands(draw):
    command_keys = draw(st.lists(parsable_keys, min_size=1, max_size=4))
    sizes = draw(
        st.lists(
            st.integers(min_value=0, max_value=2**31),
            min_size=len(command_keys),
            max_size=len(command_keys),
        )
        | st.just([])
    )

    command = [", ".join(key.deparse() for key in command_keys)]
    for size in sizes:
        command += ["--size", str(size)]
    if draw(st.booleans()):
        command.append("--deparse")

    return command_keys, sizes, command
