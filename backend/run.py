from gamerelay import create_app, socketio

app = create_app()


def main():
    # Serve through SocketIO so /ws works alongside the HTTP relay.
    # Werkzeug refuses to start without a TTY unless explicitly allowed.
    app.logger.info(f"Game relay on port {app.config['RELAY_PORT']} -> {app.extensions['relay'].address}")
    socketio.run(app, host=app.config['RELAY_HOST'], port=app.config['RELAY_PORT'],
                 allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
