import pytest

COMPONENT_TSX = """\
import { signal } from '@faber1999/axon.js';

interface Props {
  label: string;
}

export function Button(props: Props) {
  const [count, setCount] = signal(0);
  return (
    <button
      class={active() ? 'a' : 'b'}
      disabled={isDisabled()}
      onClick={() => setCount(count() + 1)}
      title="static"
      value={count}
    >
      {props.label}
    </button>
  );
}
"""


@pytest.fixture
def component_tsx() -> str:
	return COMPONENT_TSX
