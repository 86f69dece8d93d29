import yaml

from pkgward import app as app_module
from pkgward import main as main_module
from pkgward.utils.constants import EXIT_CANCELLED, EXIT_INSTALL_FAILED, EXIT_OK

from .conftest import FakeRunner


def run_main(monkeypatch, tmp_path, answers, runner, extra_args=()):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump({
        "version": "1.0",
        "settings": {"package_manager": "apt", "privilege_command": "none"},
    }))
    replies = iter(answers)

    def fake_input(prompt):
        reply = next(replies)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setattr(main_module, "setup_logging", lambda log_file, verbose: None)
    monkeypatch.setattr(app_module, "CommandRunner", lambda: runner)

    return main_module.main(["--config", str(config_file), *extra_args])


def test_install_path(monkeypatch, tmp_path, capsys):
    runner = FakeRunner()
    runner.respond("dpkg", "-s", returncode=1)
    runner.respond("dpkg", "-L", output="/lib/systemd/system/nginx.service\n")
    runner.respond("status", output="Active: active (running)\n")

    assert run_main(monkeypatch, tmp_path, ["nginx"], runner) == EXIT_OK
    assert ["apt-get", "install", "-y", "nginx"] in runner.calls
    assert "Active: active (running)" in capsys.readouterr().out


def test_install_failure_exit_code(monkeypatch, tmp_path, capsys):
    runner = FakeRunner()
    runner.respond("dpkg", "-s", returncode=1)
    runner.respond("apt-get", returncode=100, diagnostic="E: Unable to locate package badpkg")

    assert run_main(monkeypatch, tmp_path, ["badpkg"], runner) == EXIT_INSTALL_FAILED
    assert "Unable to locate package badpkg" in capsys.readouterr().err
    assert not runner.called("systemctl")


def test_installed_with_invalid_action(monkeypatch, tmp_path, capsys):
    runner = FakeRunner()

    assert run_main(monkeypatch, tmp_path, ["nginx", "restart"], runner) == EXIT_OK
    assert "Invalid action 'restart'" in capsys.readouterr().err


def test_cancelled_prompt(monkeypatch, tmp_path):
    runner = FakeRunner()

    assert run_main(monkeypatch, tmp_path, [EOFError()], runner) == EXIT_CANCELLED
    assert runner.calls == []


def test_init_config(monkeypatch, tmp_path):
    config_file = tmp_path / "fresh" / "config.yaml"
    monkeypatch.setattr(main_module, "setup_logging", lambda log_file, verbose: None)

    assert main_module.main(["--config", str(config_file), "--init-config"]) == EXIT_OK
    assert yaml.safe_load(config_file.read_text())["settings"]["service_suffix"] == ".service"


def test_setup_logging_writes_file(tmp_path):
    import logging

    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers = []
    log_file = tmp_path / "logs" / "pkgward.log"
    try:
        main_module.setup_logging(log_file, verbose=False)
        logging.getLogger("pkgward.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved


def test_init_config_write_failure(monkeypatch, tmp_path):
    from pkgward.core.config_manager import ConfigManager
    from pkgward.utils.constants import EXIT_CONFIG_WRITE_FAILED

    monkeypatch.setattr(main_module, "setup_logging", lambda log_file, verbose: None)
    monkeypatch.setattr(ConfigManager, "save_config", lambda self: False)

    assert main_module.main(["--config", str(tmp_path / "config.yaml"), "--init-config"]) == EXIT_CONFIG_WRITE_FAILED
