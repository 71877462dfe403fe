import json
import subprocess
import sys

import pytest

from lingoose.llamacpp_embedder import LlamaCppEmbedder, parse_embeddings


def _make_script(tmp_path, body):
    script = tmp_path / "embedding"
    script.write_text(f"#!{sys.executable}\nimport sys, json\n{body}\n")
    script.chmod(0o755)
    return script


def test_parse_embeddings_reads_floats():
    assert parse_embeddings(" 1.5 2 -3\n") == [1.5, 2.0, -3.0]


@pytest.mark.parametrize("text", ["1.0  2.0", "a b", ""])
def test_parse_embeddings_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_embeddings(text)


def test_embed_missing_binary_raises(tmp_path):
    embedder = LlamaCppEmbedder(llamacpp_path=str(tmp_path / "missing"))
    with pytest.raises(FileNotFoundError):
        embedder.embed(["hello"])


def test_embed_runs_binary_with_arguments(tmp_path):
    log = tmp_path / "argv.json"
    script = _make_script(
        tmp_path,
        f"open({str(log)!r}, 'w').write(json.dumps(sys.argv[1:]))\nprint('0.25 0.5 1')",
    )
    embedder = LlamaCppEmbedder(
        llamacpp_path=str(script), model_path="model.bin", args=["--extra"]
    )
    result = embedder.embed(["hello"])
    assert result == [[0.25, 0.5, 1.0]]
    assert json.loads(log.read_text()) == ["-m", "model.bin", "-p", "hello", "--extra"]


def test_embed_one_vector_per_text(tmp_path):
    script = _make_script(tmp_path, "print('1 2')")
    result = LlamaCppEmbedder(llamacpp_path=str(script)).embed(["a", "b", "c"])
    assert len(result) == 3
    assert all(vector == [1.0, 2.0] for vector in result)


def test_embed_failing_binary_raises(tmp_path):
    script = _make_script(tmp_path, "sys.exit(2)")
    with pytest.raises(subprocess.CalledProcessError):
        LlamaCppEmbedder(llamacpp_path=str(script)).embed(["a"])