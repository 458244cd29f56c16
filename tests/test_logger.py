import json
import logging

from regcode.logger import get_logger


def test_module_loggers_share_package_handlers():
    log = get_logger("regcode.test")
    root = logging.getLogger("regcode")
    assert log.handlers == []
    assert log.propagate
    assert len(root.handlers) >= 1


def test_json_lines_to_file(tmp_path):
    target = tmp_path / "logs" / "regcode.log"
    root = logging.getLogger("regcode")
    before = list(root.handlers)
    try:
        log = get_logger("regcode.filetest", level=logging.INFO, to_file=str(target))
        log.info("issued code")
        for h in root.handlers:
            h.flush()
        record = json.loads(target.read_text().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["name"] == "regcode.filetest"
        assert record["msg"] == "issued code"
    finally:
        for h in root.handlers:
            if h not in before:
                root.removeHandler(h)
                h.close()
