# tests/test_cli.py


def test_data_commands(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=['data', 'insert'])
    assert result.exit_code == 0, result.output
    assert 'Sample data inserted' in result.output

    result = runner.invoke(args=['data', 'status'])
    assert result.exit_code == 0
    assert 'bookings: 9' in result.output
    assert 'roomingListBookings: 10' in result.output

    result = runner.invoke(args=['data', 'clear'])
    assert result.exit_code == 0
    result = runner.invoke(args=['data', 'status'])
    assert 'events: 0' in result.output


def test_data_insert_reports_bad_directory(app, tmp_path):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['data', 'insert', '--directory', str(tmp_path)])
    assert result.exit_code != 0
    assert 'rooming-lists.json not found' in result.output


def test_create_user(app, client):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['create-user', 'ops', 'ops@example.com', 'secret123'])
    assert result.exit_code == 0, result.output
    assert "User 'ops' created" in result.output

    login = client.post('/api/auth/login', json={'username': 'ops', 'password': 'secret123'})
    assert login.status_code == 200

    duplicate = runner.invoke(args=['create-user', 'ops', 'other@example.com', 'secret123'])
    assert duplicate.exit_code != 0
    assert 'User already exists' in duplicate.output
