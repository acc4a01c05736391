import os
from solcver import create_app

app = create_app()

if __name__ == '__main__':
    # Debug/reloader off by default. Enable with SOLCVER_DEBUG_SERVER=1
    debug_flag = os.environ.get('SOLCVER_DEBUG_SERVER', '0') == '1'
    app.run(host='0.0.0.0', port=int(os.environ.get('SOLCVER_PORT', '5000')), debug=debug_flag, use_reloader=debug_flag)
