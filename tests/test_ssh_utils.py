"""Tests for SSH command line construction."""

from scw_connect.config.schema import ExecSettings
from scw_connect.utils.ssh_utils import (
    build_ssh_args,
    format_command_line,
    quote_remote_command,
)


class TestBuildSshArgs:

    def test_direct_without_command(self, default_settings):
        args = build_ssh_args('1.2.3.4', '', False, None, None, '', settings=default_settings)
        assert args == [
            '-q',
            '-o', 'UserKnownHostsFile=/dev/null',
            '-o', 'StrictHostKeyChecking=no',
            '-l', 'root',
            '1.2.3.4',
        ]
        assert '--' not in args
        assert '/bin/sh' not in args

    def test_with_command_and_tty(self, default_settings):
        args = build_ssh_args(
            '1.2.3.4', '10.0.0.1', True, None, ['echo', 'hi'], '',
            settings=default_settings,
        )
        assert args[-5:] == ['--', '/bin/sh', '-e', '-c', '"echo hi"']
        tty = args.index('-t')
        assert args[tty:tty + 2] == ['-t', '-t']
        assert '1.2.3.4' in args
        assert '10.0.0.1' not in args

    def test_gateway_uses_private_addr_and_proxy_command(self, default_settings):
        args = build_ssh_args(
            '1.2.3.4', '10.0.0.1', True, None, None, '5.6.7.8',
            settings=default_settings,
        )
        assert '1.2.3.4' not in args
        target = args.index('10.0.0.1')
        assert args[target + 1] == '-o'
        assert args[target + 2] == (
            'ProxyCommand=ssh -q -o UserKnownHostsFile=/dev/null '
            '-o StrictHostKeyChecking=no -W %h:%p -l root 5.6.7.8 -t -t'
        )

    def test_proxy_command_is_nested_ssh_args(self, default_settings):
        args = build_ssh_args('', '10.0.0.1', False, None, None, '5.6.7.8', settings=default_settings)
        proxy = [a for a in args if a.startswith('ProxyCommand=')]
        assert len(proxy) == 1
        nested = build_ssh_args('5.6.7.8', '', False, ['-W', '%h:%p'], None, '', settings=default_settings)
        assert proxy[0] == 'ProxyCommand=ssh ' + ' '.join(nested)
        assert '-W %h:%p' in proxy[0]
        assert proxy[0].endswith('5.6.7.8')

    def test_extra_options_joined_as_one_token(self, default_settings):
        args = build_ssh_args('1.2.3.4', '', False, ['-p', '2222'], None, '', settings=default_settings)
        assert '-p 2222' in args
        assert args.index('-p 2222') < args.index('-l')

    def test_debug_drops_quiet_and_traces_shell(self, debug_settings):
        args = build_ssh_args('1.2.3.4', '', False, None, ['uptime'], '', settings=debug_settings)
        assert '-q' not in args
        assert args[-5:] == ['/bin/sh', '-e', '-x', '-c', '"uptime"']

    def test_secure_keeps_host_key_checking(self, secure_settings):
        args = build_ssh_args('1.2.3.4', '', False, None, None, '', settings=secure_settings)
        assert 'StrictHostKeyChecking=no' not in args
        assert 'UserKnownHostsFile=/dev/null' not in args
        assert args == ['-q', '-l', 'root', '1.2.3.4']

    def test_secure_applies_to_proxy_command(self, secure_settings):
        args = build_ssh_args('', '10.0.0.1', False, None, None, '5.6.7.8', settings=secure_settings)
        assert args[-1] == 'ProxyCommand=ssh -q -W %h:%p -l root 5.6.7.8'

    def test_reads_flags_from_environment(self, monkeypatch):
        monkeypatch.setenv('DEBUG', '1')
        monkeypatch.setenv('exec_secure', '1')
        args = build_ssh_args('1.2.3.4', '', False, None, None, '')
        assert args == ['-l', 'root', '1.2.3.4']

    def test_flag_must_be_exactly_one(self, monkeypatch):
        monkeypatch.setenv('DEBUG', 'true')
        args = build_ssh_args('1.2.3.4', '', False, None, None, '')
        assert args[0] == '-q'

    def test_empty_command_is_ignored(self, default_settings):
        args = build_ssh_args('1.2.3.4', '', False, None, [], '', settings=default_settings)
        assert args[-1] == '1.2.3.4'


class TestQuoteRemoteCommand:

    def test_joins_with_spaces(self):
        assert quote_remote_command(['ls', '-la', '/tmp']) == '"ls -la /tmp"'

    def test_escapes_double_quotes(self):
        assert quote_remote_command(['echo', '"x"']) == '"echo \\"x\\""'

    def test_keeps_non_ascii(self):
        assert quote_remote_command(['echo', 'café']) == '"echo café"'


class TestFormatCommandLine:

    def test_quotes_arguments_with_spaces(self):
        line = format_command_line(['ssh', '-o', 'ProxyCommand=ssh -W %h:%p gw', '1.2.3.4'])
        assert line == "ssh -o 'ProxyCommand=ssh -W %h:%p gw' 1.2.3.4"

    def test_plain_arguments(self):
        assert format_command_line(['ssh', '-l', 'root', 'host']) == 'ssh -l root host'
